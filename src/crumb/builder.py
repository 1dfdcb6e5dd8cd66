"""Strict, fluent cookie construction.

``Builder`` mirrors the chainable ``.with_*()`` style used for
responses: every step returns a new builder and leaves the old one
untouched. Each step wraps the cookie so far in a one-attribute
override, so the finished cookie is a short delegation chain::

    cookie = (
        Builder.new("session", "abc")
        .path("/app")
        .secure()
        .http_only()
        .build()
    )

Unlike ``parse()``, the builder rejects bad input: a caller asking for
``Path=bad-path`` is told so instead of silently getting a cookie with
no path. The failure is held until ``build()`` so the chain can be
written in one expression; after the first failure, later steps are
skipped and the first error is what ``build()`` raises.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import TypeAlias

from crumb.cookie import MAX_AGE_SECONDS, Cookie, SameSite
from crumb.errors import CookieError, InvalidDomain, InvalidPath
from crumb.validate import DomainCheck, is_valid_path, validate_domain, validate_name, validate_value

# One builder step: extend the cookie, or report why not
Step: TypeAlias = Callable[[Cookie], Cookie | CookieError]


@dataclass(frozen=True, slots=True)
class Builder:
    """Accumulates a cookie, or the first error met while building it.

    Start with ``Builder.new(name, value)`` or ``Builder.wrap(cookie)``.
    """

    state: Cookie | CookieError

    @classmethod
    def new(cls, name: str, value: str) -> Builder:
        """Start a builder from a name/value pair, validating both now."""
        error = validate_name(name) or validate_value(value)
        if error is not None:
            return cls(error)
        return cls(_Pair(name, value))

    @classmethod
    def wrap(cls, cookie: Cookie) -> Builder:
        """Start a builder from an existing cookie, to change some of its attributes."""
        return cls(cookie)

    @property
    def error(self) -> CookieError | None:
        """The first error recorded, or ``None`` while the chain is valid."""
        if isinstance(self.state, CookieError):
            return self.state
        return None

    # -- Chainable steps --

    def value(self, value: str) -> Builder:
        """Replace the value, e.g. one carried over from a wrapped cookie."""

        def step(cookie: Cookie) -> Cookie | CookieError:
            error = validate_value(value)
            if error is not None:
                return error
            return _WithValue(cookie, value)

        return self._and_then(step)

    def path(self, path: str) -> Builder:
        """Set the ``Path`` attribute. Must start with ``/``."""

        def step(cookie: Cookie) -> Cookie | CookieError:
            if not is_valid_path(path):
                return InvalidPath()
            return _WithPath(cookie, path)

        return self._and_then(step)

    def domain(self, domain: str) -> Builder:
        """Set the ``Domain`` attribute. A leading dot is rejected, not stripped."""

        def step(cookie: Cookie) -> Cookie | CookieError:
            if validate_domain(domain) is not DomainCheck.AS_IS:
                return InvalidDomain()
            return _WithDomain(cookie, domain)

        return self._and_then(step)

    def max_age(self, max_age: timedelta | int) -> Builder:
        """Set the ``Max-Age`` attribute. Integers are seconds; negatives become zero."""
        if isinstance(max_age, timedelta):
            duration = max(max_age, timedelta(0))
        else:
            duration = timedelta(seconds=min(max(max_age, 0), MAX_AGE_SECONDS))
        return self._and_then(lambda cookie: _WithMaxAge(cookie, duration))

    def secure(self, secure: bool = True) -> Builder:
        """Enable or disable the ``Secure`` attribute."""
        return self._and_then(lambda cookie: _WithSecure(cookie, secure))

    def http_only(self, http_only: bool = True) -> Builder:
        """Enable or disable the ``HttpOnly`` attribute."""
        return self._and_then(lambda cookie: _WithHttpOnly(cookie, http_only))

    def same_site(self, same_site: SameSite | None) -> Builder:
        """Set the ``SameSite`` attribute, or clear it with ``None``."""
        return self._and_then(lambda cookie: _WithSameSite(cookie, same_site))

    def build(self) -> Cookie:
        """Return the constructed cookie.

        Raises:
            CookieError: The first invalid value passed to any step.
        """
        if isinstance(self.state, CookieError):
            raise self.state
        return self.state

    def _and_then(self, step: Step) -> Builder:
        if isinstance(self.state, CookieError):
            return self
        return Builder(step(self.state))


# ---------------------------------------------------------------------------
# Delegation chain
# ---------------------------------------------------------------------------


class _Pair(Cookie):
    """Innermost link: a name and value, every attribute unset."""

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: str) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def domain(self) -> str | None:
        return None

    @property
    def path(self) -> str | None:
        return None

    @property
    def max_age(self) -> timedelta | None:
        return None

    @property
    def http_only(self) -> bool:
        return False

    @property
    def secure(self) -> bool:
        return False

    @property
    def same_site(self) -> SameSite | None:
        return None


class _Delegated(Cookie):
    """Reads every attribute through to the wrapped cookie.

    Subclasses override exactly one accessor.
    """

    __slots__ = ("_inner",)

    _inner: Cookie

    def __init__(self, inner: Cookie) -> None:
        object.__setattr__(self, "_inner", inner)

    @property
    def name(self) -> str:
        return self._inner.name

    @property
    def value(self) -> str:
        return self._inner.value

    @property
    def domain(self) -> str | None:
        return self._inner.domain

    @property
    def path(self) -> str | None:
        return self._inner.path

    @property
    def max_age(self) -> timedelta | None:
        return self._inner.max_age

    @property
    def http_only(self) -> bool:
        return self._inner.http_only

    @property
    def secure(self) -> bool:
        return self._inner.secure

    @property
    def same_site(self) -> SameSite | None:
        return self._inner.same_site


class _WithValue(_Delegated):
    __slots__ = ("_value",)

    def __init__(self, inner: Cookie, value: str) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> str:
        return self._value


class _WithPath(_Delegated):
    __slots__ = ("_path",)

    def __init__(self, inner: Cookie, path: str) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_path", path)

    @property
    def path(self) -> str | None:
        return self._path


class _WithDomain(_Delegated):
    __slots__ = ("_domain",)

    def __init__(self, inner: Cookie, domain: str) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_domain", domain)

    @property
    def domain(self) -> str | None:
        return self._domain


class _WithMaxAge(_Delegated):
    __slots__ = ("_max_age",)

    def __init__(self, inner: Cookie, max_age: timedelta) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_max_age", max_age)

    @property
    def max_age(self) -> timedelta | None:
        return self._max_age


class _WithSecure(_Delegated):
    __slots__ = ("_secure",)

    def __init__(self, inner: Cookie, secure: bool) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_secure", secure)

    @property
    def secure(self) -> bool:
        return self._secure


class _WithHttpOnly(_Delegated):
    __slots__ = ("_http_only",)

    def __init__(self, inner: Cookie, http_only: bool) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_http_only", http_only)

    @property
    def http_only(self) -> bool:
        return self._http_only


class _WithSameSite(_Delegated):
    __slots__ = ("_same_site",)

    def __init__(self, inner: Cookie, same_site: SameSite | None) -> None:
        super().__init__(inner)
        object.__setattr__(self, "_same_site", same_site)

    @property
    def same_site(self) -> SameSite | None:
        return self._same_site
