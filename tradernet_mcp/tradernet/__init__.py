"""
描述: Tradernet API 接入层
主要功能:
    - 请求签名 (HMAC-SHA256)
    - 签名后的 HTTP 调用与错误封装
"""

from tradernet_mcp.tradernet.client import (
    TradernetAPIError,
    TradernetClient,
    TradernetConfigError,
    TradernetError,
)
from tradernet_mcp.tradernet.signer import sign

__all__ = [
    "TradernetAPIError",
    "TradernetClient",
    "TradernetConfigError",
    "TradernetError",
    "sign",
]
