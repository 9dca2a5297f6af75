"""
描述: Tradernet API 客户端
主要功能:
    - 签名请求构造 (公钥 / 时间戳 / HMAC 签名头)
    - 单次 POST 调用, 不做重试
    - 统一错误封装
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from tradernet_mcp.config import Settings
from tradernet_mcp.tradernet.signer import sign


logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = (
    "TRADERNET_PUBLIC_KEY and TRADERNET_PRIVATE_KEY environment variables are required"
)


# region 异常定义
class TradernetError(RuntimeError):
    """Tradernet 调用异常基类"""
    pass


class TradernetConfigError(TradernetError):
    """凭证缺失等配置异常"""
    pass


@dataclass
class TradernetAPIError(TradernetError):
    """网络异常、非 2xx 状态码或响应解析失败"""
    message: str
    status_code: int | None = None
    detail: Any | None = None

    def __str__(self) -> str:
        return self.message
# endregion


def encode_params(params: dict[str, Any]) -> str:
    """紧凑 JSON 序列化, 保持键顺序, 签名与请求体共用同一字符串"""
    return json.dumps(params, ensure_ascii=False, separators=(",", ":"))


# region Tradernet 客户端
class TradernetClient:
    """
    Tradernet API 客户端

    功能:
        - 每次调用发出且仅发出一个 HTTP 请求
        - 凭证在调用时校验, 缺失时不触发任何网络访问
    """
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        初始化客户端

        参数:
            settings: 全局配置对象
            transport: 可选的 httpx 传输层 (测试注入 MockTransport)
        """
        self._settings = settings
        self._transport = transport

    def _timestamp(self) -> str:
        return str(int(time.time()))

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"follow_redirects": True}
        timeout = self._settings.tradernet.request.timeout
        if timeout is not None:
            options["timeout"] = timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    def build_headers(self, payload: str, timestamp: str) -> dict[str, str]:
        tradernet = self._settings.tradernet
        return {
            "Content-Type": "application/json",
            "X-NtApi-PublicKey": tradernet.public_key,
            "X-NtApi-Timestamp": timestamp,
            "X-NtApi-Sig": sign(tradernet.private_key, payload + timestamp),
        }

    async def call(self, command: str, params: dict[str, Any] | None = None) -> Any:
        """
        调用 Tradernet 命令

        参数:
            command: 远端命令名, 例如 getOPQ / putTradeOrder
            params: 命令参数, 原样序列化为请求体

        返回:
            解码后的 JSON 响应体 (不做结构校验)

        抛出:
            TradernetConfigError: 公钥或私钥缺失
            TradernetAPIError: 网络异常、非 2xx 状态码或 JSON 解析失败
        """
        tradernet = self._settings.tradernet
        if not tradernet.has_credentials:
            raise TradernetConfigError(MISSING_CREDENTIALS_MESSAGE)

        payload = encode_params(params or {})
        timestamp = self._timestamp()
        headers = self.build_headers(payload, timestamp)
        url = f"{tradernet.api_url}/{command}"

        logger.debug("Calling Tradernet command", extra={"command": command})
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.post(
                    url,
                    content=payload.encode("utf-8"),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            message = str(exc).strip() or exc.__class__.__name__
            logger.warning(
                "Tradernet request failed: %s",
                message,
                extra={"command": command},
            )
            raise TradernetAPIError(message=message) from exc

        if not response.is_success:
            logger.warning(
                "Tradernet returned HTTP %s",
                response.status_code,
                extra={"command": command, "status_code": response.status_code},
            )
            raise TradernetAPIError(
                message=f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                detail=response.text,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TradernetAPIError(
                message=f"Invalid JSON response: {exc}",
                status_code=response.status_code,
                detail=response.text,
            ) from exc
# endregion
