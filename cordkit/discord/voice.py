"""Voice region wire model."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class VoiceRegion:
    id: str
    name: str
    optimal: bool = False
    deprecated: bool = False
    custom: bool = False

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "VoiceRegion":
        return cls(
            id=data["id"],
            name=data["name"],
            optimal=bool(data.get("optimal", False)),
            deprecated=bool(data.get("deprecated", False)),
            custom=bool(data.get("custom", False)),
        )
