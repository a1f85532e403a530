"""Validation of raw caller input into domain values.

Every function here takes one primitive and either returns the validated
domain value or raises a specific ``ValidationError`` subclass carrying the
offending input.  Malformed input (non-numeric text, NaN, wrong types)
always ends up as one of those subclasses, never as a ``TypeError`` or
``decimal.InvalidOperation``.

The functions are pure and hold no state, so they are safe to call from
any thread.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from discounts.domain.exceptions import (
    BlankIdentifierError,
    BlankNameError,
    InvalidAmountError,
    InvalidCountryError,
    InvalidPercentError,
    NameTooLongError,
)
from discounts.domain.model.country import Country
from discounts.domain.model.product import AppliedDiscount
from discounts.domain.model.value_objects import (
    DiscountId,
    Money,
    Percent,
    ProductId,
    ProductName,
)

MAX_NAME_LENGTH = 255

# Keeps every price calculation well inside Decimal's exponent range.
MAX_AMOUNT = Decimal("1000000000000")

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def validate_product_name(value: str) -> ProductName:
    if not isinstance(value, str) or not value.strip():
        raise BlankNameError()
    if len(value) > MAX_NAME_LENGTH:
        raise NameTooLongError(len(value), MAX_NAME_LENGTH)
    return ProductName(value)


def validate_amount(value: str | int | float | Decimal) -> Money:
    amount = _to_decimal(value)
    if amount is None or not (_ZERO < amount <= MAX_AMOUNT):
        raise InvalidAmountError(value)
    return Money(amount)


def validate_percent(value: str | int | float | Decimal) -> Percent:
    percent = _to_decimal(value)
    if percent is None or not (_ZERO <= percent <= _HUNDRED):
        raise InvalidPercentError(value)
    return Percent(percent)


def validate_country(value: str) -> Country:
    """Resolve a two-letter code (any case) to a Country.

    "se" and "SE" are accepted; "Sweden" is not.
    """
    country = Country.from_code(value) if isinstance(value, str) else None
    if country is None:
        raise InvalidCountryError(value)
    return country


def validate_discount(
    discount_id: DiscountId, percent: str | int | float | Decimal
) -> AppliedDiscount:
    return AppliedDiscount(discount_id=discount_id, percent=validate_percent(percent))


def validate_product_id(value: str) -> ProductId:
    return ProductId(_non_blank(value, "Product id"))


def validate_discount_id(value: str) -> DiscountId:
    return DiscountId(_non_blank(value, "Discount id"))


# --- Internal helpers ---------------------------------------------------------


def _non_blank(value: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BlankIdentifierError(field)
    return value


def _to_decimal(value: object) -> Decimal | None:
    """Coerce to a finite Decimal, or None if that is not possible.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather than
    its binary expansion.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result
