"""Remote content client for the learning platform API."""

from .client import ApiClient, fetch_json

__all__ = ['ApiClient', 'fetch_json']
