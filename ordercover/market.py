import logging
from typing import Any, Optional, Sequence

from .constants import ZERO_AMOUNT
from .models import FeeSelectionOptions, FeeSelectionResult, SelectionOptions, SelectionResult
from .rounding import total_fee_amount
from .schemas import validate_orders_shape
from .Validators import validate_base_unit_amount, validate_fillable_amounts

logger = logging.getLogger(__name__)


def find_orders_that_cover_fill_amount(
    orders: Sequence[Any],
    fill_amount: int,
    opts: Optional[SelectionOptions] = None,
) -> SelectionResult:
    """
    Return the subset of orders that has enough maker asset available to fill
    fill_amount plus the slippage buffer, walking from the first order to the last.
    Orders should be sorted by ascending rate so the prefix taken is the cheapest.
    Orders with nothing available are skipped. If the orders run out first,
    remaining_fill_amount holds what could not be covered.
    """
    opts = opts or SelectionOptions()
    orders = validate_orders_shape("orders", orders)
    fill_amount = validate_base_unit_amount("fill_amount", fill_amount)
    available_amounts = validate_fillable_amounts(
        orders, opts.remaining_fillable_amounts, "orders", "remaining_fillable_amounts"
    )
    slippage = validate_base_unit_amount("slippage_buffer_amount", opts.slippage_buffer_amount)

    result = SelectionResult()
    remaining = fill_amount + slippage
    for order, available in zip(orders, available_amounts):
        if remaining <= ZERO_AMOUNT:
            remaining = ZERO_AMOUNT
            break
        if available > ZERO_AMOUNT:
            result.result_orders.append(order)
            result.orders_remaining_fillable_amounts.append(available)
            remaining = max(ZERO_AMOUNT, remaining - available)
    result.remaining_fill_amount = remaining

    logger.debug(
        "Selected %d of %d orders for %d (+%d slippage), %d uncovered",
        len(result.result_orders), len(orders), fill_amount, slippage, remaining,
    )
    return result


def find_fee_orders_that_cover_fees(
    orders: Sequence[Any],
    fee_orders: Sequence[Any],
    opts: Optional[FeeSelectionOptions] = None,
) -> FeeSelectionResult:
    """
    Return the subset of fee_orders that has enough fee asset to pay the taker
    fees of filling orders at their available amounts, plus the slippage buffer.
    Fee orders should be sorted by ascending rate, same as for
    find_orders_that_cover_fill_amount.
    """
    opts = opts or FeeSelectionOptions()
    orders = validate_orders_shape("orders", orders)
    fee_orders = validate_orders_shape("fee_orders", fee_orders)
    available_amounts = validate_fillable_amounts(
        orders, opts.remaining_fillable_amounts, "orders", "remaining_fillable_amounts"
    )
    fee_available_amounts = validate_fillable_amounts(
        fee_orders, opts.remaining_fillable_fee_amounts, "fee_orders", "remaining_fillable_fee_amounts"
    )
    slippage = validate_base_unit_amount("slippage_buffer_amount", opts.slippage_buffer_amount)

    # TODO: select extra fee orders to absorb the truncation in total_fee_amount
    fee_amount = total_fee_amount(orders, available_amounts)
    logger.debug("Taker fees for %d orders total %d", len(orders), fee_amount)

    res = find_orders_that_cover_fill_amount(
        fee_orders,
        fee_amount,
        SelectionOptions(
            remaining_fillable_amounts=fee_available_amounts,
            slippage_buffer_amount=slippage,
        ),
    )
    return FeeSelectionResult(
        result_fee_orders=res.result_orders,
        fee_orders_remaining_fillable_amounts=res.orders_remaining_fillable_amounts,
        remaining_fee_amount=res.remaining_fill_amount,
    )
