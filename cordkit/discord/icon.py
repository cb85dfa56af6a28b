"""Icon value used for avatars and guild icons in request bodies."""

import base64
import json
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO


class IconType(str, Enum):
    """MIME tag of an icon."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"
    GIF = "image/gif"

    def __str__(self) -> str:
        return self.value

    @property
    def mime(self) -> str:
        return self.value

    @property
    def header(self) -> str:
        return f"data:{self.value};base64"

    @classmethod
    def from_string(cls, value: str) -> "IconType":
        """Create IconType from a MIME string; unknown types fall back to JPEG."""
        normalized = value.lower().strip()
        for icon_type in cls:
            if icon_type.value == normalized:
                return icon_type
        return cls.JPEG


@dataclass(frozen=True)
class Icon:
    """An icon: MIME type plus base64 encoded payload.

    ``str(icon)`` is the data URI the API expects. An empty payload renders
    as the empty string, which the API reads as "remove the icon".
    """

    type: IconType
    data: str = ""

    @classmethod
    def from_bytes(cls, icon_type: IconType, raw: bytes) -> "Icon":
        return cls(type=icon_type, data=base64.b64encode(raw).decode("ascii"))

    @classmethod
    def from_reader(cls, icon_type: IconType, reader: BinaryIO) -> "Icon":
        return cls.from_bytes(icon_type, reader.read())

    def __str__(self) -> str:
        if not self.data:
            return ""
        return f"{self.type.header},{self.data}"

    def to_json(self) -> str:
        return json.dumps(str(self))
