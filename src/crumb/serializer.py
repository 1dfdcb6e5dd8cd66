"""Cookie serialization.

``display()`` renders any ``Cookie`` in ``Set-Cookie`` wire format, in a
fixed attribute order regardless of how the cookie was parsed or built::

    name=value[; Path=p][; Domain=d][; Max-Age=n; Expires=date][; HttpOnly][; Secure][; SameSite=s]

``debug()`` renders a labelled field dump for logs and reprs.

Values are written as-is; every cookie was validated on the way in.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from crumb.clock import LATEST, Clock, format_http_date, utc_now

if TYPE_CHECKING:
    from crumb.cookie import Cookie


def display(cookie: Cookie, *, clock: Clock | None = None) -> str:
    """Render *cookie* as a ``Set-Cookie`` header value.

    When ``Max-Age`` is set, an equivalent ``Expires`` is emitted next to
    it for user agents that predate ``Max-Age``; *clock* supplies "now"
    for that date.
    """
    parts = [f"{cookie.name}={cookie.value}"]

    path = cookie.path
    if path is not None:
        parts.append(f"Path={path}")

    domain = cookie.domain
    if domain is not None:
        parts.append(f"Domain={domain}")

    max_age = cookie.max_age
    if max_age is not None:
        now = (clock or utc_now)()
        parts.append(f"Max-Age={max_age // timedelta(seconds=1)}")
        parts.append(f"Expires={format_http_date(expires_at(now, max_age))}")

    if cookie.http_only:
        parts.append("HttpOnly")

    if cookie.secure:
        parts.append("Secure")

    same_site = cookie.same_site
    if same_site is not None:
        parts.append(f"SameSite={same_site.value}")

    return "; ".join(parts)


def debug(cookie: Cookie) -> str:
    """Render *cookie* as ``Cookie(name=..., value=..., ...)``.

    Only attributes that are set (or true) appear after name and value.
    """
    fields: list[tuple[str, object]] = [("name", cookie.name), ("value", cookie.value)]
    if cookie.path is not None:
        fields.append(("path", cookie.path))
    if cookie.domain is not None:
        fields.append(("domain", cookie.domain))
    if cookie.max_age is not None:
        fields.append(("max_age", cookie.max_age))
    if cookie.http_only:
        fields.append(("http_only", True))
    if cookie.secure:
        fields.append(("secure", True))
    if cookie.same_site is not None:
        fields.append(("same_site", cookie.same_site))
    items = ", ".join(f"{key}={value!r}" for key, value in fields)
    return f"Cookie({items})"


def expires_at(now: datetime, max_age: timedelta) -> datetime:
    """Absolute expiry for *max_age* from *now*, saturating at the latest representable instant."""
    try:
        return now + max_age
    except OverflowError:
        return LATEST
