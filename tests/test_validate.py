"""Tests for crumb.validate: name, value, path and domain syntax."""

import pytest

from crumb.errors import InvalidName, InvalidValue
from crumb.validate import DomainCheck, is_valid_path, validate_domain, validate_name, validate_value


class TestValidateName:
    def test_token(self) -> None:
        assert validate_name("session") is None

    def test_dots_and_underscores(self) -> None:
        assert validate_name("ASP.NET_SessionId") is None

    def test_non_ascii_allowed(self) -> None:
        assert validate_name("café") is None

    def test_empty(self) -> None:
        assert isinstance(validate_name(""), InvalidName)

    @pytest.mark.parametrize("char", list('()<>@,;:\\"/[]?={} \t'))
    def test_separators(self, char: str) -> None:
        assert isinstance(validate_name(f"a{char}b"), InvalidName)

    @pytest.mark.parametrize("char", ["\x00", "\n", "\x1f", "\x7f"])
    def test_control_characters(self, char: str) -> None:
        assert isinstance(validate_name(f"a{char}b"), InvalidName)


class TestValidateValue:
    def test_plain(self) -> None:
        assert validate_value("abc123") is None

    def test_empty_allowed(self) -> None:
        assert validate_value("") is None

    def test_punctuation_in_octet_ranges(self) -> None:
        assert validate_value("v$1!#&'()*+-./:<=>?@[]^_`{|}~") is None

    @pytest.mark.parametrize("char", [" ", '"', ",", ";", "\\", "\x7f", "\n", "é"])
    def test_outside_octet_ranges(self, char: str) -> None:
        assert isinstance(validate_value(f"a{char}b"), InvalidValue)


class TestIsValidPath:
    def test_root(self) -> None:
        assert is_valid_path("/")

    def test_nested(self) -> None:
        assert is_valid_path("/index.html")

    def test_empty(self) -> None:
        assert not is_valid_path("")

    def test_relative(self) -> None:
        assert not is_valid_path("woop/sies")

    def test_semicolon(self) -> None:
        assert not is_valid_path("/a;b")

    def test_control_character(self) -> None:
        assert not is_valid_path("/hello\nwat")

    def test_space(self) -> None:
        assert not is_valid_path("/a b")


class TestValidateDomain:
    def test_as_is(self) -> None:
        assert validate_domain("hyper.example") is DomainCheck.AS_IS

    def test_leading_dot(self) -> None:
        assert validate_domain(".hyper.example") is DomainCheck.LEADING_DOT

    def test_empty(self) -> None:
        assert validate_domain("") is DomainCheck.INVALID

    def test_control_character(self) -> None:
        assert validate_domain("hyper\nexample") is DomainCheck.INVALID

    def test_semicolon(self) -> None:
        assert validate_domain("hyper;example") is DomainCheck.INVALID
