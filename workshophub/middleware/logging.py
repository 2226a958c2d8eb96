import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger("workshophub.middleware")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request, with the caller's id once the access guard resolved it."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000
        # Set by get_current_user; absent on public routes
        user_id = getattr(request.state, "user_id", None)
        logger.info(
            "%s %s - %.2fms - %s - user=%s",
            request.method,
            request.url.path,
            process_time,
            response.status_code,
            user_id or "-",
        )
        return response
