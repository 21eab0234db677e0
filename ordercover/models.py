from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .constants import ZERO_AMOUNT

"""
These are the model entities used in ordercover.
We have Order, the option structures for the two selection passes,
and the result records they return.
All amounts are integers in the asset's smallest base unit.
"""

@dataclass(frozen=True)
class Order:
    maker_asset_amount: int
    taker_asset_amount: int = 0
    maker_fee: int = 0
    taker_fee: int = 0
    maker_address: Optional[str] = None
    taker_address: Optional[str] = None
    fee_recipient_address: Optional[str] = None
    sender_address: Optional[str] = None
    maker_asset_data: Optional[str] = None
    taker_asset_data: Optional[str] = None
    exchange_address: Optional[str] = None
    expiration_time_seconds: Optional[int] = None
    salt: Optional[int] = None
    signature: Optional[str] = None


    @staticmethod
    def from_dict(d: Dict) -> "Order":
        return Order(
            maker_asset_amount=d["maker_asset_amount"],
            taker_asset_amount=d.get("taker_asset_amount", ZERO_AMOUNT),
            maker_fee=d.get("maker_fee", ZERO_AMOUNT),
            taker_fee=d.get("taker_fee", ZERO_AMOUNT),
            maker_address=d.get("maker_address"),
            taker_address=d.get("taker_address"),
            fee_recipient_address=d.get("fee_recipient_address"),
            sender_address=d.get("sender_address"),
            maker_asset_data=d.get("maker_asset_data"),
            taker_asset_data=d.get("taker_asset_data"),
            exchange_address=d.get("exchange_address"),
            expiration_time_seconds=d.get("expiration_time_seconds"),
            salt=d.get("salt"),
            signature=d.get("signature"),
        )


@dataclass(frozen=True)
class SelectionOptions:
    # one entry per order; None means use each order's maker_asset_amount
    remaining_fillable_amounts: Optional[Sequence[int]] = None
    slippage_buffer_amount: int = ZERO_AMOUNT


@dataclass(frozen=True)
class FeeSelectionOptions:
    remaining_fillable_amounts: Optional[Sequence[int]] = None
    remaining_fillable_fee_amounts: Optional[Sequence[int]] = None
    slippage_buffer_amount: int = ZERO_AMOUNT


@dataclass
class SelectionResult:
    result_orders: List[Order] = field(default_factory=list)
    orders_remaining_fillable_amounts: List[int] = field(default_factory=list)
    remaining_fill_amount: int = ZERO_AMOUNT


@dataclass
class FeeSelectionResult:
    result_fee_orders: List[Order] = field(default_factory=list)
    fee_orders_remaining_fillable_amounts: List[int] = field(default_factory=list)
    remaining_fee_amount: int = ZERO_AMOUNT


@dataclass
class MarketBuyPlan:
    selection: SelectionResult
    fee_selection: FeeSelectionResult
    total_fee_amount: int


    @property
    def fully_covered(self) -> bool:
        return (self.selection.remaining_fill_amount == ZERO_AMOUNT
                and self.fee_selection.remaining_fee_amount == ZERO_AMOUNT)
