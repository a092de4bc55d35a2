"""Shared rate limiter (per client IP, in-memory storage)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import settings

limiter = Limiter(key_func=get_remote_address)


def rate_limit() -> str:
    """Limit string for public routes, read from settings on every request."""
    return settings.rate_limit
