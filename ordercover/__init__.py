from .errors import OrderCoverError, SchemaError, ValidationError
from .models import (
    Order, SelectionOptions, FeeSelectionOptions,
    SelectionResult, FeeSelectionResult, MarketBuyPlan,
)
from .Validators import validate_base_unit_amount, validate_fillable_amounts
from .schemas import OrderRecord, validate_orders_shape
from .rounding import fee_to_fill_available, total_fee_amount
from .market import find_orders_that_cover_fill_amount, find_fee_orders_that_cover_fees
from .orchestrator import plan_market_buy

__all__ = [
"OrderCoverError", "SchemaError", "ValidationError",
"Order", "SelectionOptions", "FeeSelectionOptions",
"SelectionResult", "FeeSelectionResult", "MarketBuyPlan",
"validate_base_unit_amount", "validate_fillable_amounts",
"OrderRecord", "validate_orders_shape",
"fee_to_fill_available", "total_fee_amount",
"find_orders_that_cover_fill_amount", "find_fee_orders_that_cover_fees",
"plan_market_buy",
]
