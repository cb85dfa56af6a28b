"""Snowflake identifier value object."""

from datetime import datetime, timezone
from typing import Optional, Union

DISCORD_EPOCH_MS = 1420070400000


class Snowflake(str):
    """A Discord snowflake identifier.

    Kept as a string because that is how the API sends and accepts it;
    construction validates that it is purely numeric.
    """

    __slots__ = ()

    def __new__(cls, value: Union[int, str]) -> "Snowflake":
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"Snowflake must be an int or str, got {type(value).__name__}")
        str_value = str(value).strip()
        if not str_value.isdigit():
            raise ValueError(f"Snowflake must be numeric, got {value!r}")
        return super().__new__(cls, str_value)

    @classmethod
    def from_raw(cls, value: Union[int, str, "Snowflake"]) -> "Snowflake":
        """Create Snowflake from various input types."""
        if isinstance(value, Snowflake):
            return value
        return cls(value)

    @classmethod
    def optional(cls, value: Optional[Union[int, str]]) -> Optional["Snowflake"]:
        """Like ``from_raw`` but passes ``None`` through."""
        if value is None:
            return None
        return cls.from_raw(value)

    @property
    def created_at(self) -> datetime:
        """The time this identifier was generated."""
        timestamp_ms = (int(self) >> 22) + DISCORD_EPOCH_MS
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)

    def __repr__(self) -> str:
        return f"Snowflake({str.__repr__(self)})"
