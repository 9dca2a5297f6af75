"""
描述: Tradernet MCP Server 全局配置加载器
主要功能:
    - 统一管理 MCP Server 配置
    - 支持 YAML 文件加载与环境变量覆盖
    - 提供 Tradernet 凭证、传输层与日志配置模型
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")

DEFAULT_API_URL = "https://tradernet.com/api"


# region 基础配置模型
class ServerSettings(BaseModel):
    """MCP 服务标识与传输层配置"""
    name: str = "tradernet"
    version: str = "1.0.0"
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8081


class RequestSettings(BaseModel):
    # None 表示沿用 httpx 默认超时
    timeout: float | None = None


class TradernetSettings(BaseModel):
    """Tradernet API 凭证与地址"""
    public_key: str = ""
    private_key: str = ""
    api_url: str = DEFAULT_API_URL
    request: RequestSettings = Field(default_factory=RequestSettings)

    @property
    def has_credentials(self) -> bool:
        return bool(self.public_key and self.private_key)


class ToolsSettings(BaseModel):
    enabled: list[str] = Field(default_factory=list)


class LoggingSettings(BaseModel):
    """日志系统配置"""
    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """MCP Server 配置聚合根"""
    server: ServerSettings = Field(default_factory=ServerSettings)
    tradernet: TradernetSettings = Field(default_factory=TradernetSettings)
    tools: ToolsSettings = Field(default_factory=ToolsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
# endregion


# region 配置加载逻辑


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                key, default = expr.split(":-", 1)
                return os.getenv(key, default)
            return os.getenv(expr, "")

        return _ENV_PATTERN.sub(replace, value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return _expand_env(data)


def _set_nested(data: dict[str, Any], keys: list[str], value: Any) -> None:
    current = data
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    mapping = {
        "TRADERNET_PUBLIC_KEY": ["tradernet", "public_key"],
        "TRADERNET_PRIVATE_KEY": ["tradernet", "private_key"],
        "TRADERNET_API_URL": ["tradernet", "api_url"],
        "TRADERNET_TIMEOUT": ["tradernet", "request", "timeout"],
        "MCP_TRANSPORT": ["server", "transport"],
        "MCP_HOST": ["server", "host"],
        "MCP_PORT": ["server", "port"],
        "LOG_LEVEL": ["logging", "level"],
        "LOG_FORMAT": ["logging", "format"],
    }
    for env_key, path in mapping.items():
        env_value = os.getenv(env_key)
        if env_value is not None and env_value != "":
            _set_nested(data, path, env_value)
    return data


def load_settings(config_path: str | None = None) -> Settings:
    """
    加载配置: YAML 文件 (可选) + 环境变量覆盖

    参数:
        config_path: 配置文件路径, 缺省时读取 CONFIG_PATH 或 config.yaml

    返回:
        校验后的 Settings 对象
    """
    path = Path(config_path or os.getenv("CONFIG_PATH", "config.yaml"))
    data = _load_yaml(path)
    data = _apply_env_overrides(data)
    settings = Settings.model_validate(data)
    settings.tradernet.api_url = settings.tradernet.api_url.rstrip("/")
    return settings
# endregion
