"""Unit tests for input validation."""

from decimal import Decimal

import pytest

from discounts.domain.exceptions import (
    BlankIdentifierError,
    BlankNameError,
    InvalidAmountError,
    InvalidCountryError,
    InvalidPercentError,
    NameTooLongError,
    ValidationError,
)
from discounts.domain.model.country import Country
from discounts.domain.model.value_objects import DiscountId, Money, Percent, ProductName
from discounts.domain.service.product_validation import (
    MAX_AMOUNT,
    validate_amount,
    validate_country,
    validate_discount,
    validate_discount_id,
    validate_percent,
    validate_product_id,
    validate_product_name,
)


class TestValidateProductName:

    def test_accepts_valid_name(self):
        assert validate_product_name("Valid Product Name") == ProductName("Valid Product Name")

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_rejects_blank(self, value):
        with pytest.raises(BlankNameError):
            validate_product_name(value)

    def test_accepts_exactly_255_characters(self):
        assert validate_product_name("a" * 255).value == "a" * 255

    def test_rejects_too_long(self):
        with pytest.raises(NameTooLongError) as exc_info:
            validate_product_name("a" * 256)
        assert exc_info.value.length == 256


class TestValidateAmount:

    def test_accepts_positive(self):
        assert validate_amount(100) == Money(Decimal("100"))

    def test_accepts_string(self):
        assert validate_amount("19.99") == Money(Decimal("19.99"))

    def test_float_goes_through_str(self):
        assert validate_amount(0.1).amount == Decimal("0.1")

    @pytest.mark.parametrize("value", [0, "0.00", -5, "-0.01"])
    def test_rejects_zero_or_negative(self, value):
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_amount(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", None, True])
    def test_rejects_malformed_without_crashing(self, value):
        with pytest.raises(InvalidAmountError):
            validate_amount(value)

    def test_accepts_the_ceiling(self):
        assert validate_amount(MAX_AMOUNT) == Money(MAX_AMOUNT)

    @pytest.mark.parametrize("value", ["1e1000000", "1000000000000.01", Decimal("1E+13")])
    def test_rejects_amounts_above_the_ceiling(self, value):
        with pytest.raises(InvalidAmountError):
            validate_amount(value)


class TestValidatePercent:

    @pytest.mark.parametrize("value", [0, "0", 50, "99.99", 100, Decimal("100.0")])
    def test_accepts_closed_interval(self, value):
        assert isinstance(validate_percent(value), Percent)

    @pytest.mark.parametrize("value", [-1, "-0.01", "100.01", 150])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidPercentError) as exc_info:
            validate_percent(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", ["ten", "", "NaN", "-Infinity", [10]])
    def test_rejects_malformed_without_crashing(self, value):
        with pytest.raises(InvalidPercentError):
            validate_percent(value)


class TestValidateCountry:

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("SE", Country.SWEDEN),
            ("DE", Country.GERMANY),
            ("FR", Country.FRANCE),
            ("se", Country.SWEDEN),
            ("De", Country.GERMANY),
            ("fr", Country.FRANCE),
        ],
    )
    def test_accepts_codes_in_any_case(self, code, expected):
        assert validate_country(code) is expected

    @pytest.mark.parametrize("name", ["Sweden", "Germany", "France"])
    def test_rejects_full_names(self, name):
        with pytest.raises(InvalidCountryError) as exc_info:
            validate_country(name)
        assert exc_info.value.value == name

    @pytest.mark.parametrize("value", ["InvalidCountry", "", "US", " SE"])
    def test_rejects_unknown(self, value):
        with pytest.raises(InvalidCountryError):
            validate_country(value)


class TestValidateDiscount:

    def test_builds_pending_discount(self):
        discount = validate_discount(DiscountId("test-discount"), 25)
        assert discount.discount_id == DiscountId("test-discount")
        assert discount.percent.value == Decimal("25")
        assert not discount.is_persisted

    def test_delegates_percent_check(self):
        with pytest.raises(InvalidPercentError):
            validate_discount(DiscountId("test-discount"), 101)


class TestValidateIdentifiers:

    def test_accepts_ids(self):
        assert validate_product_id("prod-1").value == "prod-1"
        assert validate_discount_id("summer").value == "summer"

    @pytest.mark.parametrize("value", ["", "  "])
    def test_rejects_blank(self, value):
        with pytest.raises(BlankIdentifierError, match="Product id"):
            validate_product_id(value)
        with pytest.raises(BlankIdentifierError, match="Discount id"):
            validate_discount_id(value)


def test_all_failures_are_validation_errors():
    for exc_type in (
        BlankNameError,
        NameTooLongError,
        InvalidAmountError,
        InvalidPercentError,
        InvalidCountryError,
        BlankIdentifierError,
    ):
        assert issubclass(exc_type, ValidationError)
