"""
Rate Limiting for Startup Launchpad API
=======================================
slowapi limiter backed by in-process memory storage.

Limits apply per authenticated user when the auth dependency has stored
one on request.state, otherwise per client IP. Special endpoints:
- /api/login, /api/register: RATE_LIMIT_AUTH (brute force protection)
- /api/ai/*: RATE_LIMIT_AI (paid completion calls)

Set RATE_LIMIT_ENABLED=false to turn every limit off (tests do).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging_config import logger


def get_user_identifier(request: Request) -> str:
    """
    Rate limit key: authenticated user id if known, else client IP.
    """
    user_id = getattr(request.state, 'user_id', None)
    if user_id:
        return f"user:{user_id}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    storage_uri="memory://",
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Return a JSON 429 with a Retry-After hint"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_user_identifier(request)}: {exc.detail}"
    )

    return JSONResponse(
        status_code=429,
        content={
            "code": "RATE_LIMITED",
            "message": "Too many requests. Please slow down.",
            "details": {"limit": str(exc.detail)},
        },
        headers={"Retry-After": "60"},
    )


def auth_rate_limit():
    """Rate limit for login/register"""
    return limiter.limit(settings.RATE_LIMIT_AUTH, key_func=get_remote_address)


def ai_operation_rate_limit():
    """Rate limit for AI completion endpoints"""
    return limiter.limit(settings.RATE_LIMIT_AI, key_func=get_user_identifier)
