from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence, Tuple

from .errors import ValidationError
from .models import Order


def validate_base_unit_amount(name: str, value) -> int:
    """
    Check that value is a whole, non-negative amount of base units and
    return it as an int.
    Accepts int, integral Decimal, or a decimal string such as "1000".
    Floats are rejected since they cannot carry an exact amount.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Expected {name} to be a base unit amount but received {value!r}")

    if isinstance(value, int):
        amount = value
    elif isinstance(value, (Decimal, str)):
        try:
            dec = Decimal(value.strip()) if isinstance(value, str) else value
        except InvalidOperation:
            raise ValidationError(f"Expected {name} to be a base unit amount but received {value!r}") from None
        if not dec.is_finite():
            raise ValidationError(f"Expected {name} to be a finite amount but received {value!r}")
        if dec != dec.to_integral_value():
            raise ValidationError(f"Expected {name} to have no decimal places but received {value!r}")
        amount = int(dec)
    else:
        raise ValidationError(f"Expected {name} to be a base unit amount but received {value!r}")

    if amount < 0:
        raise ValidationError(f"Expected {name} to be non-negative but received {value!r}")
    return amount


def validate_fillable_amounts(
    orders: Sequence[Order],
    amounts: Optional[Sequence],
    orders_name: str,
    amounts_name: str,
) -> List[int]:
    """
    Resolve the per-order available amounts.
    When amounts is None every order contributes its full maker_asset_amount.
    The length is checked before any element so a mismatch is reported first.
    """
    if amounts is None:
        return [validate_base_unit_amount(f"{orders_name}[{i}].maker_asset_amount", o.maker_asset_amount)
                for i, o in enumerate(orders)]

    if len(amounts) != len(orders):
        raise ValidationError(
            f"Expected {orders_name} length ({len(orders)}) to equal "
            f"{amounts_name} length ({len(amounts)})"
        )
    return [validate_base_unit_amount(f"{amounts_name}[{i}]", a) for i, a in enumerate(amounts)]


def validate_fee_terms(name: str, order: Order) -> Tuple[int, int]:
    """
    Return (maker_asset_amount, taker_fee) of order as ints.
    The fee ratio divides by maker_asset_amount, so it must be non-zero.
    """
    maker_asset_amount = validate_base_unit_amount(f"{name}.maker_asset_amount", order.maker_asset_amount)
    taker_fee = validate_base_unit_amount(f"{name}.taker_fee", order.taker_fee)
    if maker_asset_amount == 0:
        raise ValidationError(
            f"Expected {name}.maker_asset_amount to be non-zero to compute its taker fee share"
        )
    return maker_asset_amount, taker_fee
