"""Lenient ``Set-Cookie`` parsing.

``parse()`` accepts what a user agent would accept: a bad name/value
pair or an oversized string is fatal, while a bad optional attribute is
dropped without disturbing an earlier valid occurrence of the same
attribute ("last valid wins").

The resulting ``ParsedCookie`` keeps the source string and records each
textual field as a ``(start, end)`` span into it. Nothing is copied
until an accessor is read.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, timedelta
from typing import TYPE_CHECKING, TypeAlias

from crumb.clock import parse_http_date
from crumb.config import DEFAULT_CONFIG, CookieConfig
from crumb.cookie import MAX_AGE_SECONDS, Cookie, SameSite
from crumb.errors import InvalidName, TooLong
from crumb.validate import DomainCheck, is_valid_path, validate_domain, validate_name, validate_value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("crumb.parser")

# Half-open (start, end) character offsets into the source string
Span: TypeAlias = tuple[int, int]

_MAX_AGE_RE = re.compile(r"[+-]?[0-9]+")
_MAX_AGE_DIGITS = len(str(MAX_AGE_SECONDS))

_SAME_SITE = {"lax": SameSite.LAX, "strict": SameSite.STRICT}

# Unicode White_Space. Unlike str.isspace() this excludes 0x1C-0x1F.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


class ParsedCookie(Cookie):
    """A cookie read out of a ``Set-Cookie`` string.

    Attributes:
        _source: The full text that was parsed.
        _name, _value: Spans of the name/value pair.
        _domain, _path: Spans of the last valid occurrence, or ``None``.

    Every span lies within ``_source`` and covers text that passed
    validation when the cookie was parsed.
    """

    __slots__ = (
        "_domain",
        "_http_only",
        "_max_age",
        "_name",
        "_path",
        "_same_site",
        "_secure",
        "_source",
        "_value",
    )

    _source: str
    _name: Span
    _value: Span
    _domain: Span | None
    _path: Span | None
    _max_age: timedelta | None
    _secure: bool
    _http_only: bool
    _same_site: SameSite | None

    def __init__(
        self,
        source: str,
        name: Span,
        value: Span,
        *,
        domain: Span | None = None,
        path: Span | None = None,
        max_age: timedelta | None = None,
        secure: bool = False,
        http_only: bool = False,
        same_site: SameSite | None = None,
    ) -> None:
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_domain", domain)
        object.__setattr__(self, "_path", path)
        object.__setattr__(self, "_max_age", max_age)
        object.__setattr__(self, "_secure", secure)
        object.__setattr__(self, "_http_only", http_only)
        object.__setattr__(self, "_same_site", same_site)

    def _slice(self, span: Span) -> str:
        start, end = span
        return self._source[start:end]

    @property
    def source(self) -> str:
        """The original text this cookie was parsed from."""
        return self._source

    @property
    def name(self) -> str:
        return self._slice(self._name)

    @property
    def value(self) -> str:
        return self._slice(self._value)

    @property
    def domain(self) -> str | None:
        if self._domain is None:
            return None
        return self._slice(self._domain)

    @property
    def path(self) -> str | None:
        if self._path is None:
            return None
        return self._slice(self._path)

    @property
    def max_age(self) -> timedelta | None:
        return self._max_age

    @property
    def http_only(self) -> bool:
        return self._http_only

    @property
    def secure(self) -> bool:
        return self._secure

    @property
    def same_site(self) -> SameSite | None:
        return self._same_site


def parse(source: str, *, config: CookieConfig | None = None) -> ParsedCookie:
    """Parse a ``Set-Cookie`` header value into a ``ParsedCookie``.

    Args:
        source: The header value, e.g. ``"id=a3fWa; Path=/; Secure"``.
            A single cookie, not a ``Cookie:`` request header list.
        config: Length limit and clock. Defaults to ``CookieConfig()``.

    Raises:
        TooLong: *source* exceeds ``config.max_length`` UTF-8 bytes.
        InvalidName: The first segment has no ``=``, or the name is
            not a valid token.
        InvalidValue: The value contains a non cookie-octet.

    Example::

        cookie = parse("foo=bar; Domain=.hyper.example; Max-Age=60")
        cookie.domain   # "hyper.example"
        cookie.max_age  # timedelta(seconds=60)
    """
    cfg = config or DEFAULT_CONFIG
    if _byte_length_exceeds(source, cfg.max_length):
        raise TooLong

    segments = _segments(source)
    first_start, first_end = next(segments)

    eq = source.find("=", first_start, first_end)
    if eq == -1:
        raise InvalidName
    name = _trim(source, first_start, eq)
    value = _trim(source, eq + 1, first_end)
    error = validate_name(_text(source, name)) or validate_value(_text(source, value))
    if error is not None:
        raise error

    domain: Span | None = None
    path: Span | None = None
    max_age: timedelta | None = None
    secure = False
    http_only = False
    same_site: SameSite | None = None
    # Max-Age takes precedence, so the date is only parsed once the
    # whole attribute list has been seen without one.
    expires: Span | None = None

    for start, end in segments:
        eq = source.find("=", start, end)
        if eq == -1:
            attr_name = _text(source, _trim(source, start, end))
            attr_value: Span | None = None
        else:
            attr_name = _text(source, _trim(source, start, eq))
            attr_value = _trim(source, eq + 1, end)

        key = attr_name.lower()
        if key == "secure":
            secure = True
            continue
        if key == "httponly":
            http_only = True
            continue
        if attr_value is None:
            if key in ("max-age", "path", "domain", "expires", "samesite"):
                logger.debug("ignoring %s attribute without a value", attr_name)
            continue

        text = _text(source, attr_value)
        match key:
            case "max-age":
                parsed_age = _parse_max_age(text)
                if parsed_age is None:
                    logger.debug("ignoring unparseable Max-Age %r", text)
                    continue
                max_age = parsed_age
            case "path":
                if not is_valid_path(text):
                    logger.debug("ignoring invalid Path %r", text)
                    continue
                path = attr_value
            case "domain":
                match validate_domain(text):
                    case DomainCheck.AS_IS:
                        domain = attr_value
                    case DomainCheck.LEADING_DOT if attr_value[1] - attr_value[0] > 1:
                        domain = (attr_value[0] + 1, attr_value[1])
                    case DomainCheck.LEADING_DOT:
                        logger.debug("ignoring empty Domain %r", text)
                        continue
                    case DomainCheck.INVALID:
                        logger.debug("ignoring invalid Domain %r", text)
                        continue
            case "expires":
                expires = attr_value
            case "samesite":
                policy = _SAME_SITE.get(text.lower())
                if policy is None:
                    logger.debug("ignoring unknown SameSite %r", text)
                    continue
                same_site = policy
            case _:
                # Unknown attributes are ignored (RFC 6265 §5.2)
                pass

    if max_age is None and expires is not None:
        max_age = _max_age_from_expires(_text(source, expires), cfg)

    return ParsedCookie(
        source,
        name,
        value,
        domain=domain,
        path=path,
        max_age=max_age,
        secure=secure,
        http_only=http_only,
        same_site=same_site,
    )


def _byte_length_exceeds(source: str, limit: int) -> bool:
    if len(source) > limit:
        return True
    if source.isascii():
        return False
    return len(source.encode("utf-8", "surrogatepass")) > limit


def _segments(source: str) -> Iterator[Span]:
    """Yield the span of every ``;``-separated segment. Always yields at least one."""
    start = 0
    while (end := source.find(";", start)) != -1:
        yield start, end
        start = end + 1
    yield start, len(source)


def _trim(source: str, start: int, end: int) -> Span:
    """Narrow ``(start, end)`` to exclude surrounding whitespace."""
    while start < end and source[start] in _WHITESPACE:
        start += 1
    while end > start and source[end - 1] in _WHITESPACE:
        end -= 1
    return start, end


def _text(source: str, span: Span) -> str:
    return source[span[0] : span[1]]


def _parse_max_age(text: str) -> timedelta | None:
    """Integer seconds; non-positive means "expire now". ``None`` if unparseable."""
    if _MAX_AGE_RE.fullmatch(text) is None:
        return None
    if text[0] == "-":
        return timedelta(0)
    digits = text.lstrip("+").lstrip("0") or "0"
    # int() refuses digit strings past the interpreter's conversion limit
    if len(digits) > _MAX_AGE_DIGITS:
        return timedelta(seconds=MAX_AGE_SECONDS)
    return timedelta(seconds=min(int(digits), MAX_AGE_SECONDS))


def _max_age_from_expires(text: str, cfg: CookieConfig) -> timedelta | None:
    """Convert an ``Expires`` date to the lifetime remaining from now."""
    expires_at = parse_http_date(text)
    if expires_at is None:
        logger.debug("ignoring unparseable Expires %r", text)
        return None
    now = cfg.clock()
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    remaining = expires_at - now
    if remaining <= timedelta(0):
        return timedelta(0)
    return timedelta(seconds=remaining // timedelta(seconds=1))
