"""Tests for crumb.config: CookieConfig validation."""

import dataclasses

import pytest

from crumb.clock import utc_now
from crumb.config import OFFSET_LIMIT, CookieConfig
from crumb.errors import ConfigurationError


class TestCookieConfig:
    def test_defaults(self) -> None:
        config = CookieConfig()
        assert config.max_length == 4096
        assert config.clock is utc_now

    def test_frozen(self) -> None:
        config = CookieConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_length = 10  # type: ignore[misc]

    def test_largest_offset_allowed(self) -> None:
        assert CookieConfig(max_length=OFFSET_LIMIT).max_length == 0xFFFF

    def test_max_length_must_fit_offsets(self) -> None:
        with pytest.raises(ConfigurationError, match="max_length"):
            CookieConfig(max_length=OFFSET_LIMIT + 1)

    def test_max_length_positive(self) -> None:
        with pytest.raises(ConfigurationError):
            CookieConfig(max_length=0)

    def test_clock_must_be_callable(self) -> None:
        with pytest.raises(ConfigurationError, match="clock"):
            CookieConfig(clock="now")  # type: ignore[arg-type]
