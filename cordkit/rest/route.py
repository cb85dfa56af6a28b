"""Route templates and their compilation.

A ``Route`` names one remote endpoint: its HTTP method, a path with ordered
``{placeholder}`` slots and the query keys it accepts. Compiling a route is a
pure function of the route and the values given; the result is an immutable
``CompiledRoute`` that feeds exactly one request.
"""

import re
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

from cordkit.exceptions import RouteCompilationException

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

QueryValues = Mapping[str, Any]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Route:
    """A named, parameterized description of one endpoint.

    ``base_url`` is only set for routes that live outside the API root, such as
    the public invite URL; API routes get their root from the executor.
    """

    method: str
    path: str
    queries: FrozenSet[str] = field(default_factory=frozenset)
    base_url: Optional[str] = None
    slots: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "queries", frozenset(self.queries))
        object.__setattr__(self, "slots", tuple(_PLACEHOLDER.findall(self.path)))

    def __str__(self) -> str:
        return f"{self.method} {self.path}"

    def compile(self, query: Optional[QueryValues] = None, *values: Any) -> "CompiledRoute":
        """
        Substitute path slots and query values.

        Args:
            query: Query key to value; ``None`` values are left out.
            *values: One value per path slot, in slot order.

        Returns:
            The compiled route.

        Raises:
            RouteCompilationException: On a slot count mismatch, an empty
                path value, or a query key the route does not accept.
        """
        if len(values) != len(self.slots):
            raise RouteCompilationException(
                "Path parameter count mismatch",
                str(self),
                {"expected": len(self.slots), "got": len(values)},
            )

        rendered = iter(self._encode_path_values(values))
        path = _PLACEHOLDER.sub(lambda _: next(rendered), self.path)

        return CompiledRoute(
            route=self,
            path=path,
            query=self._encode_query(query or {}),
        )

    def _encode_path_values(self, values: Iterable[Any]) -> Tuple[str, ...]:
        encoded = []
        for slot, value in zip(self.slots, values):
            text = _render(value) if value is not None else ""
            if not text:
                raise RouteCompilationException(
                    "Path parameter must not be empty", str(self), {"slot": slot}
                )
            encoded.append(quote(text, safe=""))
        return tuple(encoded)

    def _encode_query(self, query: QueryValues) -> Tuple[Tuple[str, str], ...]:
        unknown = sorted(set(query) - self.queries)
        if unknown:
            raise RouteCompilationException(
                "Query parameter not accepted by route", str(self), {"keys": unknown}
            )
        return tuple(
            (key, _render(value)) for key, value in sorted(query.items()) if value is not None
        )


@dataclass(frozen=True)
class CompiledRoute:
    """A route with concrete path and query values."""

    route: Route
    path: str
    query: Tuple[Tuple[str, str], ...] = ()

    @property
    def method(self) -> str:
        return self.route.method

    @property
    def query_string(self) -> str:
        return urlencode(self.query)

    @property
    def route_path(self) -> str:
        """Path plus query string, relative to the route's root."""
        if self.query:
            return f"{self.path}?{self.query_string}"
        return self.path

    def url(self, api_base: Optional[str] = None) -> str:
        """
        Absolute URL for this compiled route.

        Args:
            api_base: Root used when the route has no ``base_url`` of its own.
        """
        base = self.route.base_url or api_base
        if base is None:
            raise ValueError(f"No base URL for API route {self.route}")
        return base.rstrip("/") + self.route_path
