from typing import Any, Optional, Sequence

from .constants import ZERO_AMOUNT
from .market import find_fee_orders_that_cover_fees, find_orders_that_cover_fill_amount
from .models import FeeSelectionOptions, MarketBuyPlan, SelectionOptions
from .rounding import total_fee_amount

def plan_market_buy(orders: Sequence[Any], fee_orders: Sequence[Any], fill_amount: int,
                    remaining_fillable_amounts: Optional[Sequence[int]] = None,
                    remaining_fillable_fee_amounts: Optional[Sequence[int]] = None,
                    slippage_buffer_amount: int = ZERO_AMOUNT,
                    fee_slippage_buffer_amount: int = ZERO_AMOUNT) -> MarketBuyPlan:
    selection = find_orders_that_cover_fill_amount(
        orders, fill_amount,
        SelectionOptions(
            remaining_fillable_amounts=remaining_fillable_amounts,
            slippage_buffer_amount=slippage_buffer_amount,
        ),
    )
    # fees are owed only on the orders actually selected, at their selected amounts
    fee_selection = find_fee_orders_that_cover_fees(
        selection.result_orders, fee_orders,
        FeeSelectionOptions(
            remaining_fillable_amounts=selection.orders_remaining_fillable_amounts,
            remaining_fillable_fee_amounts=remaining_fillable_fee_amounts,
            slippage_buffer_amount=fee_slippage_buffer_amount,
        ),
    )
    return MarketBuyPlan(
        selection=selection,
        fee_selection=fee_selection,
        total_fee_amount=total_fee_amount(selection.result_orders, selection.orders_remaining_fillable_amounts),
    )
