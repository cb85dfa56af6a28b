"""Shared helpers for request payloads and wire decoding."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import aiohttp


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO8601 timestamp as sent by the API."""
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` without the keys whose value is ``None``."""
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class File:
    """A file attached to a message payload."""

    name: str
    data: bytes
    description: Optional[str] = None
    content_type: str = "application/octet-stream"


class Payload(ABC):
    """A request payload that knows how to render itself as a request body."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON form of this payload."""
        pass

    def files(self) -> List[File]:
        """Files to upload alongside the JSON body."""
        return []

    def to_body(self) -> Union[Dict[str, Any], aiohttp.FormData]:
        """
        Render the request body.

        Returns:
            The JSON dict, or multipart form data carrying ``payload_json``
            plus one ``files[n]`` field per attachment when files are present.
        """
        data = self.to_dict()
        files = self.files()
        if not files:
            return data

        data = dict(data)
        data["attachments"] = [
            drop_none({"id": index, "filename": file.name, "description": file.description})
            for index, file in enumerate(files)
        ]

        form = aiohttp.FormData()
        form.add_field("payload_json", json.dumps(data), content_type="application/json")
        for index, file in enumerate(files):
            form.add_field(
                f"files[{index}]",
                file.data,
                filename=file.name,
                content_type=file.content_type,
            )
        return form
