"""Tests for setcookie.attributes â the attribute table."""

from datetime import UTC, datetime

import pytest

from setcookie.attributes import ATTRIBUTES, BY_NAME
from setcookie.errors import InvalidAttribute
from setcookie.record import SetCookie


class TestTable:
    def test_serialization_order(self) -> None:
        assert [a.name for a in ATTRIBUTES] == [
            "Expires",
            "Max-Age",
            "Domain",
            "Path",
            "Secure",
            "HttpOnly",
            "SameSite",
        ]

    def test_lookup_keys_lowercase(self) -> None:
        assert set(BY_NAME) == {"expires", "max-age", "domain", "path", "secure", "httponly", "samesite"}

    def test_fields_exist_on_record(self) -> None:
        record = SetCookie(key="k", value="v")
        for attr in ATTRIBUTES:
            assert getattr(record, attr.field) is None

    def test_errors_match_names(self) -> None:
        for attr in ATTRIBUTES:
            assert issubclass(attr.error, InvalidAttribute)
            assert attr.error.attribute == attr.name

    def test_only_secure_and_httponly_are_flags(self) -> None:
        assert {a.name for a in ATTRIBUTES if a.flag} == {"Secure", "HttpOnly"}


class TestParsers:
    def test_integer(self) -> None:
        assert BY_NAME["max-age"].parse("42") == 42
        assert BY_NAME["max-age"].parse("+7") == 7

    @pytest.mark.parametrize("raw", [None, "", "abc", "-", "x1", "١٠٠"])
    def test_integer_invalid(self, raw: str | None) -> None:
        with pytest.raises(ValueError):
            BY_NAME["max-age"].parse(raw)

    def test_text(self) -> None:
        assert BY_NAME["domain"].parse("example.com") == "example.com"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_text_invalid(self, raw: str | None) -> None:
        with pytest.raises(ValueError):
            BY_NAME["path"].parse(raw)

    @pytest.mark.parametrize("raw", [None, ""])
    def test_flag(self, raw: str | None) -> None:
        assert BY_NAME["secure"].parse(raw) is True

    def test_flag_with_value(self) -> None:
        with pytest.raises(ValueError):
            BY_NAME["httponly"].parse("true")

    def test_date(self) -> None:
        assert BY_NAME["expires"].parse("Wed, 21 Oct 2015 07:28:00 GMT") == datetime(
            2015, 10, 21, 7, 28, tzinfo=UTC
        )


class TestToSegment:
    def test_flag(self) -> None:
        assert BY_NAME["secure"].to_segment(True) == "Secure"

    def test_flag_false_still_present(self) -> None:
        assert BY_NAME["httponly"].to_segment(False) == "HttpOnly"

    def test_text(self) -> None:
        assert BY_NAME["samesite"].to_segment("Strict") == "SameSite=Strict"

    def test_integer(self) -> None:
        assert BY_NAME["max-age"].to_segment(100) == "Max-Age=100"

    def test_date(self) -> None:
        value = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        assert BY_NAME["expires"].to_segment(value) == "Expires=Wed, 21 Oct 2015 07:28:00 GMT"
