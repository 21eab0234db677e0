from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import SchemaError, ValidationError
from .models import Order
from .Validators import validate_base_unit_amount

"""
Boundary validation for order records that arrive untyped (decoded JSON, API
payloads). Records may use the exchange's camelCase keys or snake_case keys,
and amounts may be integers or decimal strings.
Orders constructed in code get the same amount checks and are returned
with int amounts.
"""


class OrderRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    maker_asset_amount: int = Field(alias="makerAssetAmount")
    taker_asset_amount: int = Field(default=0, alias="takerAssetAmount")
    maker_fee: int = Field(default=0, alias="makerFee")
    taker_fee: int = Field(default=0, alias="takerFee")

    maker_address: Optional[str] = Field(default=None, alias="makerAddress")
    taker_address: Optional[str] = Field(default=None, alias="takerAddress")
    fee_recipient_address: Optional[str] = Field(default=None, alias="feeRecipientAddress")
    sender_address: Optional[str] = Field(default=None, alias="senderAddress")
    maker_asset_data: Optional[str] = Field(default=None, alias="makerAssetData")
    taker_asset_data: Optional[str] = Field(default=None, alias="takerAssetData")
    exchange_address: Optional[str] = Field(default=None, alias="exchangeAddress")
    expiration_time_seconds: Optional[int] = Field(default=None, alias="expirationTimeSeconds")
    salt: Optional[int] = None
    signature: Optional[str] = None

    @field_validator("maker_asset_amount", "taker_asset_amount", "maker_fee", "taker_fee", mode="before")
    @classmethod
    def _base_unit_amount(cls, v: Any, info) -> int:
        return validate_base_unit_amount(info.field_name, v)

    @field_validator("expiration_time_seconds", "salt", mode="before")
    @classmethod
    def _optional_integer(cls, v: Any, info) -> Optional[int]:
        if v is None:
            return None
        return validate_base_unit_amount(info.field_name, v)

    def to_order(self) -> Order:
        return Order.from_dict(self.model_dump())


_AMOUNT_FIELDS = ("maker_asset_amount", "taker_asset_amount", "maker_fee", "taker_fee")


def _normalise_order(name: str, order: Order) -> Order:
    # typed orders get the same amount checks as records; the order is rebuilt
    # only when a field was given as a string or Decimal
    changes = {}
    for f in _AMOUNT_FIELDS:
        value = getattr(order, f)
        try:
            amount = validate_base_unit_amount(f"{name}.{f}", value)
        except ValidationError as e:
            raise SchemaError(f"{name} does not conform to the order schema: {e}") from e
        if type(value) is not int:
            changes[f] = amount
    return replace(order, **changes) if changes else order


def validate_orders_shape(name: str, orders: Sequence[Any]) -> List[Order]:
    """
    Check every record in orders and return them as Order values with int amounts.
    Raises SchemaError naming the sequence and index of the first bad record.
    """
    if not isinstance(orders, (list, tuple)):
        raise SchemaError(f"Expected {name} to be a list of orders but received {type(orders).__name__}")

    out: List[Order] = []
    for i, o in enumerate(orders):
        if isinstance(o, Order):
            out.append(_normalise_order(f"{name}[{i}]", o))
        elif isinstance(o, Mapping):
            try:
                out.append(OrderRecord.model_validate(dict(o)).to_order())
            except PydanticValidationError as e:
                raise SchemaError(f"{name}[{i}] does not conform to the order schema: {e}") from e
        else:
            raise SchemaError(f"Expected {name}[{i}] to be an order but received {type(o).__name__}")
    return out
