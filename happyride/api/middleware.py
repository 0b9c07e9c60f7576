"""Cross-cutting HTTP concerns: rate limiting and access logging."""

import logging
import time

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

logger = logging.getLogger("happyride.access")

limiter = Limiter(key_func=get_remote_address)


async def log_requests(request: Request, call_next):
    """Log method, path, status and latency of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
