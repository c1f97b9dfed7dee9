"""Rate Limit Middleware - rejects requests beyond the per-source budget of the current window.

Invariants:
    - Source key is the client host; requests without client info share the "unknown" key
    - Rejected requests get 429 with RateLimitExceededError's body and are never forwarded
    - Every response carries RateLimit-Limit / RateLimit-Remaining / RateLimit-Reset headers

Design Decisions:
    - Counter state in-process (FixedWindowCounter): single-process deployment, state lost on restart
    - Clock injectable so tests can move time without sleeping
"""

import logging
import time
from collections.abc import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from employee_registry.core.errors import RateLimitExceededError
from employee_registry.core.rate_window import FixedWindowCounter, WindowDecision

logger = logging.getLogger(__name__)


def _rate_limit_headers(decision: WindowDecision) -> dict[str, str]:
    return {
        "RateLimit-Limit": str(decision.limit),
        "RateLimit-Remaining": str(decision.remaining),
        "RateLimit-Reset": str(decision.reset_after_seconds),
    }


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Fixed-window rate limiting keyed by client address."""

    def __init__(
        self,
        app,
        counter: FixedWindowCounter,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(app)
        self.counter = counter
        self.enabled = enabled
        self.clock = clock

    async def dispatch(self, request: Request, call_next) -> Response:
        if not self.enabled:
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        decision = self.counter.hit(client, self.clock())
        headers = _rate_limit_headers(decision)

        if not decision.allowed:
            exc = RateLimitExceededError(decision.reset_after_seconds)
            logger.warning(
                f"Rate limit exceeded: {request.method} {request.url.path}",
                extra={"client": client, "error_code": exc.code},
            )
            headers["Retry-After"] = str(decision.reset_after_seconds)
            return JSONResponse(
                status_code=exc.http_status,
                content=exc.to_response(),
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
