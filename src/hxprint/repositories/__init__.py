"""Repository layer for sending HTTP requests."""

from hxprint.repositories.http import HttpConnectionError, HttpRepository

__all__ = ["HttpConnectionError", "HttpRepository"]
