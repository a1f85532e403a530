"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.  The
primitive checks that make a value well-formed for the caller (blank names,
out-of-range percents) live in ``domain.service.product_validation``; the
constructors here only guard against programming errors such as passing a
float where a Decimal is expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

@dataclass(frozen=True)
class ProductId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DiscountId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductName:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Amounts entering the system
    are validated as positive; scaling by a discount factor above 100 %
    is allowed to go below zero (see ``calculate_final_price``).
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def scale(self, factor: Decimal) -> Money:
        """Multiply by a factor, e.g. ``Decimal("0.90")`` for 10 % off."""
        if not isinstance(factor, Decimal):
            raise TypeError(f"Can only scale Money by Decimal, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Percent:
    """A percentage in the closed interval [0, 100]."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise TypeError(
                f"Percent value must be a Decimal, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.value}%"
