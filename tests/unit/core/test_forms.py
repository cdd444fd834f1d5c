"""Unit tests for form parsing and binding."""

from decimal import Decimal

import pytest

from src.storefront.core.errors import ValidationError
from src.storefront.core.forms import (
    bind_form,
    parse_bool,
    parse_decimal,
    parse_int,
    parse_optional_int,
    parse_str,
    read_int,
)
from src.storefront.entities import Product

BINDINGS = {
    "name": ("name", parse_str),
    "price": ("price", parse_decimal),
    "weight": ("weight", parse_int),
}


class TestParsers:
    @pytest.mark.parametrize("value", ["true", "on", "1", "yes", "TRUE", "true,false"])
    def test_parse_bool_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "off", "0", "no", ""])
    def test_parse_bool_false(self, value):
        assert parse_bool(value) is False

    def test_parse_bool_invalid(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")

    def test_parse_decimal(self):
        assert parse_decimal(" 19.99 ") == Decimal("19.99")
        with pytest.raises(ValueError):
            parse_decimal("abc")

    @pytest.mark.parametrize("value", ["NaN", "sNaN", "Infinity", "-inf"])
    def test_parse_decimal_rejects_non_finite(self, value):
        with pytest.raises(ValueError):
            parse_decimal(value)

    def test_parse_optional_int(self):
        assert parse_optional_int("") is None
        assert parse_optional_int("0") is None
        assert parse_optional_int("7") == 7

    def test_parse_str_strips(self):
        assert parse_str("  Oxford ") == "Oxford"


class TestBindForm:
    def test_binds_only_present_fields(self):
        product = Product(name="Old", weight=100)

        bound = bind_form(product, {"name": "New", "ignored": "x"}, BINDINGS)

        assert bound == {"name"}
        assert product.name == "New"
        assert product.weight == 100

    def test_invalid_field_leaves_target_untouched(self):
        product = Product(name="Old", weight=100)

        with pytest.raises(ValidationError) as exc_info:
            bind_form(product, {"name": "New", "weight": "heavy"}, BINDINGS)

        assert exc_info.value.field == "weight"
        assert product.name == "Old"

    def test_read_int(self):
        assert read_int({"productid": "44"}, "productid") == 44
        assert read_int({}, "productid") == 0
        with pytest.raises(ValidationError):
            read_int({"productid": "x"}, "productid")
