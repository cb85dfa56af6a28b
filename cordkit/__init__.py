"""Typed asyncio client for the Discord HTTP API."""

__version__ = "0.1.0"
