"""
描述: 账户类工具
主要功能:
    - 账户初始数据 (getOPQ)
    - 持仓与资金 (getPositionJson)
    - 安全会话列表 (getSecuritySessions)
"""

from __future__ import annotations

from tradernet_mcp.tools.base import BaseTool


class GetUserDataTool(BaseTool):
    name = "get_user_data"
    description = (
        "Get initial user data (account info, portfolio summary, open positions). "
        "This is the primary command to check your account status."
    )
    command = "getOPQ"


class GetPortfolioTool(BaseTool):
    name = "get_portfolio"
    description = (
        "Get current portfolio positions and account balances. Returns account funds, "
        "open positions with P&L, market values, and settlement info."
    )
    command = "getPositionJson"


class GetSecuritySessionsTool(BaseTool):
    name = "get_security_sessions"
    description = (
        "Get list of currently open security sessions "
        "(for two-factor authentication operations)"
    )
    command = "getSecuritySessions"
