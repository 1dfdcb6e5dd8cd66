"""Syntax checks for cookie names, values, paths and domains.

Name and value checks follow the validator protocol::

    def check(value: str) -> CookieError | None:
        '''Return the error, or None if valid.'''

so the parser can raise the result and the builder can store it.
Path and domain checks report validity only; the parser drops bad
attributes while the builder rejects them, so the caller decides.

All checks are pure and total: they never raise.
"""

import re
from enum import Enum

from crumb.errors import InvalidName, InvalidValue

# token = 1*<any CHAR except CTLs or separators>  (RFC 2616 §2.2)
_TOKEN_RE = re.compile(r'[^\x00-\x20\x7f()<>@,;:\\"/\[\]?={}]+')

# cookie-octet = %x21 / %x23-2B / %x2D-3A / %x3C-5B / %x5D-7E  (RFC 6265 §4.1.1)
_COOKIE_OCTETS_RE = re.compile(r"[\x21\x23-\x2b\x2d-\x3a\x3c-\x5b\x5d-\x7e]*")

_PATH_RE = re.compile(r"/[^\x00-\x20;\x7f]*")

_DOMAIN_RE = re.compile(r"[^\x00-\x20;\x7f]+")


class DomainCheck(Enum):
    """Outcome of ``validate_domain``."""

    AS_IS = "as_is"
    LEADING_DOT = "leading_dot"
    INVALID = "invalid"


def validate_name(name: str) -> InvalidName | None:
    """Name must be a non-empty token."""
    if _TOKEN_RE.fullmatch(name) is None:
        return InvalidName()
    return None


def validate_value(value: str) -> InvalidValue | None:
    """Value must consist of cookie-octets only. Empty is allowed."""
    if _COOKIE_OCTETS_RE.fullmatch(value) is None:
        return InvalidValue()
    return None


def is_valid_path(path: str) -> bool:
    """Path must start with ``/`` and contain no ``;`` or control characters."""
    return _PATH_RE.fullmatch(path) is not None


def validate_domain(domain: str) -> DomainCheck:
    """Classify *domain* so callers can strip a leading dot without rescanning.

    A leading ``.`` is ignored by user agents (RFC 6265 §5.2.3), so the
    parser keeps what follows it. The builder refuses it.
    """
    if _DOMAIN_RE.fullmatch(domain) is None:
        return DomainCheck.INVALID
    if domain[0] == ".":
        return DomainCheck.LEADING_DOT
    return DomainCheck.AS_IS
