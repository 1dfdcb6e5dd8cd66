"""Crumb: HTTP cookie parsing and building per RFC 6265.

Parse a received ``Set-Cookie`` value leniently::

    import crumb

    cookie = crumb.parse("id=a3fWa; Path=/docs; Domain=.example.com; Secure")
    cookie.path    # "/docs"
    cookie.domain  # "example.com"

Build one to send, strictly::

    from crumb import Builder, SameSite

    cookie = (
        Builder.new("id", "a3fWa")
        .path("/docs")
        .same_site(SameSite.LAX)
        .build()
    )
    str(cookie)  # "id=a3fWa; Path=/docs; SameSite=Lax"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Builder",
    "ConfigurationError",
    "Cookie",
    "CookieConfig",
    "CookieError",
    "CrumbError",
    "ErrorKind",
    "InvalidDomain",
    "InvalidName",
    "InvalidPath",
    "InvalidValue",
    "ParsedCookie",
    "SameSite",
    "TooLong",
    "debug",
    "display",
    "parse",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    if name in ("parse", "ParsedCookie"):
        from crumb import parser as _parser

        return getattr(_parser, name)

    if name == "Builder":
        from crumb.builder import Builder

        return Builder

    if name in ("Cookie", "SameSite"):
        from crumb import cookie as _cookie

        return getattr(_cookie, name)

    if name in ("display", "debug"):
        from crumb import serializer as _serializer

        return getattr(_serializer, name)

    if name == "CookieConfig":
        from crumb.config import CookieConfig

        return CookieConfig

    if name in (
        "ConfigurationError",
        "CookieError",
        "CrumbError",
        "ErrorKind",
        "InvalidDomain",
        "InvalidName",
        "InvalidPath",
        "InvalidValue",
        "TooLong",
    ):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
