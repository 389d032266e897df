"""Per-client rate limiting shared by every route."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from school_locator.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)
