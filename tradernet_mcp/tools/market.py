"""
描述: 行情与证券信息工具
主要功能:
    - 证券详情 (getSecurityInfo)
    - K 线历史 (getHloc)
    - 代码搜索 (tickerFinder), 支持 TICKER@MARKET 过滤语法
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictInt

from tradernet_mcp.tools.base import BaseTool


class SecurityInfoParams(BaseModel):
    ticker: str = Field(description='Ticker symbol, e.g. "AAPL.US", "SBER"')


class GetSecurityInfoTool(BaseTool):
    name = "get_security_info"
    description = "Get detailed information about a security/ticker (name, currency, exchange, min step, etc.)"
    command = "getSecurityInfo"
    Params = SecurityInfoParams

    def build_payload(self, params: SecurityInfoParams) -> dict[str, Any]:
        return {"ticker": params.ticker, "sup": True}


class QuotesHistoryParams(BaseModel):
    ticker: str = Field(description='Ticker symbol, e.g. "AAPL.US"')
    timeframe: Literal["1", "5", "15", "60", "1440"] = Field(
        description="Candle interval in minutes: 1, 5, 15, 60 (1h), or 1440 (1d)"
    )
    date_from: str = Field(
        description='Start date in format "DD.MM.YYYY hh:mm", e.g. "01.01.2025 00:00"'
    )
    date_to: str = Field(
        description='End date in format "DD.MM.YYYY hh:mm", e.g. "31.01.2025 23:59"'
    )
    count: StrictInt = Field(
        default=0, description="Extra candlesticks beyond the date range (0 = none)"
    )


class GetQuotesHistoryTool(BaseTool):
    name = "get_quotes_history"
    description = (
        "Get historical candlestick (OHLCV) data for a ticker. "
        "Returns arrays of high/low/open/close prices with timestamps."
    )
    command = "getHloc"
    Params = QuotesHistoryParams

    def build_payload(self, params: QuotesHistoryParams) -> dict[str, Any]:
        return {
            "id": params.ticker,
            "timeframe": int(params.timeframe),
            "date_from": params.date_from,
            "date_to": params.date_to,
            "count": params.count,
            "intervalMode": "ClosedRay",
        }


class SearchTickersParams(BaseModel):
    query: str = Field(
        description=(
            'Search text. Use "TICKER@MARKET" to filter by market. Markets: MCX (MICEX), '
            "FORTS (derivatives), FIX (NYSE/NASDAQ), EU (Europe), KASE (Kazakhstan)"
        )
    )


class SearchTickersTool(BaseTool):
    name = "search_tickers"
    description = (
        "Search for securities/tickers by name or symbol. Supports market filter "
        'with @ syntax, e.g. "AAPL@FIX" for NYSE/NASDAQ.'
    )
    command = "tickerFinder"
    Params = SearchTickersParams

    def build_payload(self, params: SearchTickersParams) -> dict[str, Any]:
        return {"text": params.query}
