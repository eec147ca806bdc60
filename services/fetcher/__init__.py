"""HTTP fetcher package."""

from services.fetcher.client import ApiClient

__all__ = ["ApiClient"]
