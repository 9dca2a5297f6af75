"""
描述: 价格提醒工具
主要功能:
    - 新增价格提醒 (togglePriceAlert)
    - 删除价格提醒 (togglePriceAlert + del)
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from tradernet_mcp.tools.base import BaseTool, Number


TriggerType = Literal[
    "crossing",
    "crossing_down",
    "crossing_up",
    "less_then",
    "greater_then",
    "channel_in",
    "channel_out",
    "moving_down_from_current",
    "moving_up_from_current",
    "moving_down_from_maximum",
    "moving_up_from_minimum",
]


class AddPriceAlertParams(BaseModel):
    ticker: str = Field(description='Ticker symbol in Tradernet format, e.g. "AAPL.US"')
    price: str = Field(description="Target price for the alert")
    trigger_type: TriggerType = Field(description="When to trigger the alert")
    quote_type: Literal["ltp", "bap", "bbp", "op", "pp"] = Field(
        default="ltp",
        description="Price basis: ltp (last trade), bap (best bid), bbp (best ask), op (open), pp (close)",
    )
    notification_type: Literal["email", "sms", "push", "all"] = Field(
        default="push", description="How to notify: email, sms, push, or all"
    )
    alert_period: Literal["0", "60", "300", "900", "3600", "86400"] = Field(
        default="0", description="Re-alert frequency in seconds (0 = once)"
    )


class AddPriceAlertTool(BaseTool):
    name = "add_price_alert"
    description = "Set a price alert for a ticker. You'll be notified when the price condition is met."
    command = "togglePriceAlert"
    Params = AddPriceAlertParams

    def build_payload(self, params: AddPriceAlertParams) -> dict[str, Any]:
        return {
            "ticker": params.ticker,
            "price": {"price": params.price},
            "trigger_type": params.trigger_type,
            "quote_type": params.quote_type,
            "notification_type": params.notification_type,
            "alert_period": params.alert_period,
            "expire": 0,
        }


class DeletePriceAlertParams(BaseModel):
    alert_id: Number = Field(description="Alert ID to delete")


class DeletePriceAlertTool(BaseTool):
    name = "delete_price_alert"
    description = "Delete an existing price alert by its ID"
    command = "togglePriceAlert"
    Params = DeletePriceAlertParams

    def build_payload(self, params: DeletePriceAlertParams) -> dict[str, Any]:
        # 删除时远端仍要求 quote_type / notification_type, 取固定值即可
        return {
            "id": params.alert_id,
            "del": True,
            "quote_type": "ltp",
            "notification_type": "email",
        }
