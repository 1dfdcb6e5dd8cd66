"""The ``Cookie`` capability set.

A cookie is not one concrete record here. Parsed cookies read their
fields out of the source text by offset, built cookies read them
through a chain of single-attribute wrappers, and both answer the same
accessors. Only crumb's own modules may define new kinds of cookie, so
every ``Cookie`` a caller holds is one that was validated on the way in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from enum import Enum
from typing import NoReturn

# Larger Max-Age values saturate here rather than overflow timedelta
MAX_AGE_SECONDS = timedelta.max // timedelta(seconds=1)


class SameSite(Enum):
    """The ``SameSite`` attribute. Absence is ``None``, not a third member."""

    LAX = "Lax"
    STRICT = "Strict"


class Cookie(ABC):
    """Read-only view of a single ``Set-Cookie`` value.

    ``str(cookie)`` renders the wire format; ``repr(cookie)`` renders a
    labelled field dump for diagnostics.

    Instances are immutable. Subclassing is restricted to the crumb
    package; hold cookies as ``Cookie`` and construct them with
    ``crumb.parse()`` or ``crumb.Builder``.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__.partition(".")[0] != "crumb":
            msg = f"{cls.__qualname__} cannot subclass Cookie; cookies are created by crumb.parse() or crumb.Builder"
            raise TypeError(msg)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def value(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def domain(self) -> str | None:
        """The ``Domain`` attribute, without any leading dot."""
        raise NotImplementedError

    @property
    @abstractmethod
    def path(self) -> str | None:
        raise NotImplementedError

    @property
    @abstractmethod
    def max_age(self) -> timedelta | None:
        """The ``Max-Age`` attribute, or the lifetime derived from ``Expires``."""
        raise NotImplementedError

    @property
    @abstractmethod
    def http_only(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def secure(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def same_site(self) -> SameSite | None:
        raise NotImplementedError

    def __str__(self) -> str:
        from crumb.serializer import display

        return display(self)

    def __repr__(self) -> str:
        from crumb.serializer import debug

        return debug(self)
