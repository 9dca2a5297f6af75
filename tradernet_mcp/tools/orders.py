"""
描述: 交易指令工具
主要功能:
    - 下单 (putTradeOrder), 枚举参数映射为远端数字代码
    - 撤单 (delTradeOrder)
    - 止损 / 止盈设置 (putStopLoss)
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, StrictInt

from tradernet_mcp.tools.base import BaseTool, Number


ACTION_CODES = {"buy": 1, "buy_margin": 2, "sell": 3, "sell_short": 4}
ORDER_TYPE_CODES = {"market": 1, "limit": 2, "stop": 3, "stop_limit": 4}
EXPIRATION_CODES = {"day": 1, "day_ext": 2, "gtc": 3}


# region 下单
class PlaceOrderParams(BaseModel):
    instrument: str = Field(description='Ticker symbol, e.g. "AAPL.US", "SBER", "SIE.EU"')
    action: Literal["buy", "buy_margin", "sell", "sell_short"] = Field(description="Order action")
    order_type: Literal["market", "limit", "stop", "stop_limit"] = Field(description="Order type")
    quantity: StrictInt = Field(gt=0, description="Number of shares/lots")
    limit_price: Optional[Number] = Field(
        default=None, description="Limit price (for limit and stop_limit orders)"
    )
    stop_price: Optional[Number] = Field(
        default=None, description="Stop price (for stop and stop_limit orders)"
    )
    expiration: Literal["day", "day_ext", "gtc"] = Field(
        default="day",
        description="Order expiration: day, day+extended, or good-till-cancelled",
    )


class PlaceOrderTool(BaseTool):
    name = "place_order"
    description = "Place a new trading order (buy, sell, short, margin). Returns order_id on success."
    command = "putTradeOrder"
    Params = PlaceOrderParams

    def build_payload(self, params: PlaceOrderParams) -> dict[str, Any]:
        return {
            "instr_name": params.instrument,
            "action_id": ACTION_CODES[params.action],
            "order_type_id": ORDER_TYPE_CODES[params.order_type],
            "qty": params.quantity,
            "limit_price": params.limit_price if params.limit_price is not None else 0,
            "stop_price": params.stop_price if params.stop_price is not None else 0,
            "expiration_id": EXPIRATION_CODES[params.expiration],
        }
# endregion


# region 撤单
class CancelOrderParams(BaseModel):
    order_id: Number = Field(description="Order ID to cancel")


class CancelOrderTool(BaseTool):
    name = "cancel_order"
    description = "Cancel an active order by its ID"
    command = "delTradeOrder"
    Params = CancelOrderParams

    def build_payload(self, params: CancelOrderParams) -> dict[str, Any]:
        return {"order_id": params.order_id}
# endregion


# region 止损 / 止盈
class StopLossParams(BaseModel):
    instrument: str = Field(description='Ticker symbol, e.g. "AAPL.US"')
    # 必填但可为 null: null 表示保持不变
    stop_loss: Optional[Number] = Field(description="Stop-loss price, or null to skip")
    take_profit: Optional[Number] = Field(description="Take-profit price, or null to skip")
    trailing_stop_percent: Optional[Number] = Field(
        default=None, description="Trailing stop-loss percentage, or null to skip"
    )


class SetStopLossTakeProfitTool(BaseTool):
    name = "set_stop_loss_take_profit"
    description = "Set stop-loss and/or take-profit for a position. Pass null to leave unchanged."
    command = "putStopLoss"
    Params = StopLossParams

    def build_payload(self, params: StopLossParams) -> dict[str, Any]:
        return {
            "instr_name": params.instrument,
            "stop_loss": params.stop_loss,
            "take_profit": params.take_profit,
            "stoploss_trailing_percent": params.trailing_stop_percent,
        }
# endregion
