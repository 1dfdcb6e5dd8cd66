"""Tests for crumb.serializer: wire format and debug dumps."""

from datetime import UTC, datetime, timedelta

from crumb.builder import Builder
from crumb.clock import LATEST
from crumb.cookie import SameSite
from crumb.parser import parse
from crumb.serializer import debug, display, expires_at

NOW = datetime(2019, 5, 21, 21, 12, 11, tzinfo=UTC)


def _now() -> datetime:
    return NOW


class TestDisplay:
    def test_name_value_only(self) -> None:
        assert display(Builder.new("n", "v").build()) == "n=v"

    def test_most_attributes_round_trip(self) -> None:
        orig = "foo=bar; Path=/index.html; Domain=hyper.example; HttpOnly; Secure; SameSite=Strict"
        assert display(parse(orig)) == orig

    def test_canonical_order_and_casing(self) -> None:
        c = parse("foo=bar; samesite=lax; secure; httponly; domain=.hyper.example; path=/")
        assert display(c) == "foo=bar; Path=/; Domain=hyper.example; HttpOnly; Secure; SameSite=Lax"

    def test_max_age_with_expires(self) -> None:
        c = Builder.new("foo", "bar").max_age(100).build()
        assert display(c, clock=_now) == "foo=bar; Max-Age=100; Expires=Tue, 21 May 2019 21:13:51 GMT"

    def test_max_age_zero(self) -> None:
        c = Builder.new("foo", "bar").max_age(0).build()
        assert display(c, clock=_now) == "foo=bar; Max-Age=0; Expires=Tue, 21 May 2019 21:12:11 GMT"

    def test_expires_prefix_with_real_clock(self) -> None:
        c = Builder.new("foo", "bar").max_age(timedelta(seconds=100)).build()
        assert display(c).startswith("foo=bar; Max-Age=100; Expires=")

    def test_expires_saturates(self) -> None:
        c = Builder.new("foo", "bar").max_age(timedelta(days=10)).build()
        near_end = datetime(9999, 12, 30, tzinfo=UTC)
        assert display(c, clock=lambda: near_end).endswith("; Expires=Fri, 31 Dec 9999 23:59:59 GMT")

    def test_flags_omitted_when_false(self) -> None:
        c = Builder.new("foo", "bar").secure(False).http_only(False).build()
        assert display(c) == "foo=bar"

    def test_str_uses_display(self) -> None:
        c = Builder.new("foo", "bar").path("/").same_site(SameSite.STRICT).build()
        assert str(c) == "foo=bar; Path=/; SameSite=Strict"


class TestExpiresAt:
    def test_adds(self) -> None:
        assert expires_at(NOW, timedelta(seconds=1)) == datetime(2019, 5, 21, 21, 12, 12, tzinfo=UTC)

    def test_overflow_saturates(self) -> None:
        assert expires_at(NOW, timedelta.max) == LATEST


class TestDebug:
    def test_name_value(self) -> None:
        assert debug(Builder.new("foo", "bar").build()) == "Cookie(name='foo', value='bar')"

    def test_field_order(self) -> None:
        c = parse("foo=bar; Secure; HttpOnly; Max-Age=10; Domain=hyper.example; Path=/")
        assert debug(c) == (
            "Cookie(name='foo', value='bar', path='/', domain='hyper.example', "
            "max_age=datetime.timedelta(seconds=10), http_only=True, secure=True)"
        )

    def test_same_site(self) -> None:
        c = parse("foo=bar; SameSite=Lax")
        assert debug(c) == f"Cookie(name='foo', value='bar', same_site={SameSite.LAX!r})"

    def test_repr_uses_debug(self) -> None:
        c = parse("foo=bar; Path=/")
        assert repr(c) == debug(c)
