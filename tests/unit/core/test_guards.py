"""
Tests for the raising domain guards.
"""

from datetime import UTC, datetime

import pytest

from store_admin.core.domain import ErrorKind, InvalidValueException, MissingValueException, guards
from store_admin.domains.store_config.domain.value_objects import DomainKind


@pytest.mark.unit
class TestRequireString:
    """Tests for require_string and optional_string."""

    def test_returns_stripped_value(self):
        assert guards.require_string("  shop  ", "name") == "shop"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values(self, value):
        with pytest.raises(MissingValueException) as exc_info:
            guards.require_string(value, "name")

        assert exc_info.value.kind == ErrorKind.MISSING_VALUE
        assert exc_info.value.field == "name"

    def test_non_string_is_invalid(self):
        with pytest.raises(InvalidValueException):
            guards.require_string(12, "name")

    def test_max_length(self):
        with pytest.raises(InvalidValueException) as exc_info:
            guards.require_string("x" * 11, "title", max_length=10)

        assert exc_info.value.field == "title"

    def test_optional_string_returns_none_for_blank(self):
        assert guards.optional_string("  ", "subdomain") is None


@pytest.mark.unit
class TestRequireEnum:
    """Tests for enum coercion."""

    def test_coerces_value_to_member(self):
        assert guards.require_enum("principal", DomainKind, "kind") is DomainKind.PRINCIPAL

    def test_unknown_value_lists_allowed_values(self):
        with pytest.raises(InvalidValueException) as exc_info:
            guards.require_enum("tertiary", DomainKind, "kind")

        assert "principal" in exc_info.value.message
        assert exc_info.value.details["value"] == "tertiary"


@pytest.mark.unit
class TestOtherGuards:
    """Tests for URL, email, bool, number, list and date guards."""

    def test_optional_url_skips_missing(self):
        assert guards.optional_url(None, "config_url") is None
        assert guards.optional_url("https://x.com/cfg", "config_url") == "https://x.com/cfg"

    def test_optional_url_rejects_malformed(self):
        with pytest.raises(InvalidValueException):
            guards.optional_url("not a url", "config_url")

    def test_require_email(self):
        assert guards.require_email(" dev@example.com ", "responsible") == "dev@example.com"
        with pytest.raises(InvalidValueException):
            guards.require_email("dev", "responsible")

    def test_optional_bool_default_and_type(self):
        assert guards.optional_bool(None, "active", default=True) is True
        with pytest.raises(InvalidValueException):
            guards.optional_bool("yes", "active", default=True)

    def test_require_in_range(self):
        assert guards.require_in_range(30, 1, 365, "value") == 30
        with pytest.raises(InvalidValueException):
            guards.require_in_range(400, 1, 365, "value")
        with pytest.raises(MissingValueException):
            guards.require_in_range(None, 1, 365, "value")

    def test_require_positive(self):
        with pytest.raises(InvalidValueException):
            guards.require_positive(0, "weight")

    def test_require_string_list(self):
        assert guards.require_string_list(["read_orders", " write_products "], "permissions") == (
            "read_orders",
            "write_products",
        )
        with pytest.raises(MissingValueException):
            guards.require_string_list([], "permissions")
        with pytest.raises(MissingValueException):
            guards.require_string_list(["read", ""], "permissions")

    def test_optional_mapping_copies(self):
        source = {"a": 1}
        copied = guards.optional_mapping(source, "configuration")

        assert copied == source
        assert copied is not source
        with pytest.raises(InvalidValueException):
            guards.optional_mapping(["a"], "configuration")

    def test_require_datetime_accepts_iso_strings(self):
        parsed = guards.require_datetime("2024-03-01T10:00:00", "updated_on")

        assert parsed == datetime(2024, 3, 1, 10, 0, tzinfo=UTC)

    def test_require_datetime_rejects_garbage(self):
        with pytest.raises(InvalidValueException):
            guards.require_datetime("yesterday", "updated_on")
