from typing import Optional, Sequence

from .constants import ZERO_AMOUNT
from .models import Order
from .Validators import validate_base_unit_amount, validate_fee_terms, validate_fillable_amounts


def fee_to_fill_available(available: int, order: Order, name: str = "order") -> int:
    """
    Taker fee owed for filling `available` units of the order's maker asset.
    Multiply first, then truncate, so the share is exact up to one base unit:
    100 maker units with a fee of 7, filled 50, owe 3 (not 3.5).
    """
    available = validate_base_unit_amount(f"{name}.available", available)
    maker_asset_amount, taker_fee = validate_fee_terms(name, order)
    return (available * taker_fee) // maker_asset_amount


def total_fee_amount(orders: Sequence[Order], available_amounts: Optional[Sequence[int]] = None) -> int:
    """
    Sum of the truncated per-order fees.
    Each order can lose up to one base unit to truncation, so across many small
    orders the total may fall short of the true liability. No slack is added
    here; callers that need full coverage widen the slippage buffer.
    With no available_amounts every order is filled in full.
    """
    available_amounts = validate_fillable_amounts(orders, available_amounts, "orders", "available_amounts")
    # check every order before summing any fee
    terms = [validate_fee_terms(f"orders[{i}]", o) for i, o in enumerate(orders)]

    total = ZERO_AMOUNT
    for (maker_asset_amount, taker_fee), available in zip(terms, available_amounts):
        total += (available * taker_fee) // maker_asset_amount
    return total
