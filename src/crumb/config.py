"""Parser and serializer configuration.

CookieConfig is a frozen dataclass: immutable after creation, checked
once at construction instead of on every parse.
"""

from dataclasses import dataclass

from crumb.clock import Clock, utc_now
from crumb.errors import ConfigurationError

# Parsed cookies store 16-bit offsets into their source text
OFFSET_LIMIT = 0xFFFF


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Cookie handling configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(max_length=1024, clock=frozen_clock)
    """

    # Longest accepted source text, in UTF-8 bytes
    max_length: int = 4096

    # "Now" for Expires resolution and Expires emission
    clock: Clock = utc_now

    def __post_init__(self) -> None:
        if not 0 < self.max_length <= OFFSET_LIMIT:
            msg = f"max_length must be between 1 and {OFFSET_LIMIT}, got {self.max_length}"
            raise ConfigurationError(msg)
        if not callable(self.clock):
            msg = f"clock must be callable, got {type(self.clock).__name__}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = CookieConfig()
