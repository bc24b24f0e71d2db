"""Async client for the Binalyze AIR public API."""

from air_mcp.api.base import AIRAPIError
from air_mcp.api.client import AIRClient

__all__ = ["AIRAPIError", "AIRClient"]
