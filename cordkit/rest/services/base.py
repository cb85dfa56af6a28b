"""Base class for resource services."""

from abc import ABC
from typing import Any, Callable, List, TypeVar

from cordkit.rest.client import RestClient

T = TypeVar("T")


def list_of(decoder: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    """Lift a single-item decoder to a JSON array decoder."""

    def decode(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
        return [decoder(item) for item in data]

    return decode


class Service(ABC):
    """A stateless facade over one resource family.

    Each operation compiles exactly one route and hands it to the shared
    ``RestClient``.
    """

    def __init__(self, rest_client: RestClient):
        self._rest_client = rest_client

    @property
    def rest_client(self) -> RestClient:
        return self._rest_client
