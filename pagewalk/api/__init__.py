"""High-level client API."""

from .client import APIClient

__all__ = ["APIClient"]
