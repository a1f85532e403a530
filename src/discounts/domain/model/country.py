"""Countries a product can be sold in, with their VAT rates."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class Country(Enum):
    """Closed set of supported countries.

    Each member carries its two-letter code and VAT rate.  Lookup is by
    code only; full country names are not accepted.
    """

    SWEDEN = ("SE", Decimal("25"))
    GERMANY = ("DE", Decimal("19"))
    FRANCE = ("FR", Decimal("20"))

    def __init__(self, code: str, vat_percent: Decimal) -> None:
        self.code = code
        self.vat_percent = vat_percent

    @classmethod
    def from_code(cls, code: str) -> Country | None:
        """Return the member for an exact (case-insensitive) code, or None."""
        wanted = code.upper()
        for country in cls:
            if country.code == wanted:
                return country
        return None

    def __str__(self) -> str:
        return self.code
