"""Crumb exception hierarchy.

Shared by the parser and the builder so both report failures with the
same types. Every cookie failure is a ``CookieError`` with a fixed
message and a ``kind`` for matching without ``isinstance`` chains.
"""

from enum import Enum


class ErrorKind(Enum):
    """The closed set of reasons a cookie can be rejected."""

    INVALID_NAME = "invalid_name"
    INVALID_VALUE = "invalid_value"
    INVALID_PATH = "invalid_path"
    INVALID_DOMAIN = "invalid_domain"
    TOO_LONG = "too_long"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_NAME: "cookie name contains invalid character",
    ErrorKind.INVALID_VALUE: "cookie value contains invalid character",
    ErrorKind.INVALID_PATH: "cookie path is invalid",
    ErrorKind.INVALID_DOMAIN: "cookie domain is invalid",
    ErrorKind.TOO_LONG: "cookie string is too long",
}


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when a ``CookieConfig`` is constructed with invalid settings."""


class CookieError(CrumbError, ValueError):
    """A cookie failed validation while being parsed or built.

    Carries no payload beyond its ``kind``; which field was at fault is
    implied by the subclass.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(_MESSAGES[kind])
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class InvalidName(CookieError):  # noqa: N818
    """Name is empty or contains a separator or control character."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_NAME)


class InvalidValue(CookieError):  # noqa: N818
    """Value contains a character outside the cookie-octet ranges."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_VALUE)


class InvalidPath(CookieError):  # noqa: N818
    """Path is empty, relative, or contains ``;`` or a control character."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_PATH)


class InvalidDomain(CookieError):  # noqa: N818
    """Domain is empty, has a leading dot, or contains ``;`` or a control character."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_DOMAIN)


class TooLong(CookieError):  # noqa: N818
    """Source text exceeds the configured maximum length."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.TOO_LONG)
