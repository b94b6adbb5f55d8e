"""
Unit tests for property access and value rendering.
"""

from decimal import Decimal

import pytest

from xmlparser.xml_io import AccessorMissingError, PropertyReader, render_value
from xmlparser.xml_io.properties import element_name_for, getter_name, validate_property_names
from xmlparser.xml_io.types import DumpFailedError


class Account:
    balance = "attribute"

    def getBalance(self):
        return "getter"

    def getOwnerName(self):
        return "Grace"

    def close(self):
        pass


class TestGetterName:

    def test_capitalizes_first_letter_only(self):
        assert getter_name("age") == "getAge"
        assert getter_name("ownerName") == "getOwnerName"
        assert getter_name("x") == "getX"

    def test_empty_name(self):
        with pytest.raises(ValueError):
            getter_name("")


class TestRenderValue:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (25, "25"),
            (-2147483648, "-2147483648"),
            (2.5, "2.5"),
            (Decimal("10.50"), "10.50"),
            ("text", "text"),
            (b"bytes", "bytes"),
        ],
    )
    def test_canonical_text(self, value, expected):
        assert render_value(value) == expected


class TestPropertyReader:

    def test_getter_takes_precedence_over_attribute(self):
        assert PropertyReader().read(Account(), "balance") == "getter"

    def test_camel_case_property(self):
        assert PropertyReader().read_text(Account(), "ownerName") == "Grace"

    def test_methods_are_not_attributes(self):
        with pytest.raises(AccessorMissingError) as exc_info:
            PropertyReader().read(Account(), "close")

        assert exc_info.value.property_name == "close"
        assert exc_info.value.type_name == "Account"

    def test_mapping_key(self):
        assert PropertyReader().read({"qty": 3}, "qty") == 3

    def test_mapping_missing_key(self):
        with pytest.raises(AccessorMissingError):
            PropertyReader().read({"qty": 3}, "sku")


class TestHelpers:

    def test_element_name_for(self):
        assert element_name_for(Account()) == "account"

    def test_validate_property_names(self):
        assert validate_property_names(("a", "b")) == ["a", "b"]

        with pytest.raises(DumpFailedError):
            validate_property_names(["a", None])
