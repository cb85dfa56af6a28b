"""REST layer: route templates, the request executor and resource services."""

from cordkit.rest.client import RequestOptions, RestClient
from cordkit.rest.retry import BackoffStrategy
from cordkit.rest.route import CompiledRoute, Route

__all__ = [
    "BackoffStrategy",
    "CompiledRoute",
    "RequestOptions",
    "RestClient",
    "Route",
]
