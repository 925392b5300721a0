"""
FastAPI middleware for authentication request logging and timing.
"""
import time
import logging
from fastapi import Request

logger = logging.getLogger(__name__)


async def log_requests_middleware(request: Request, call_next):
    """Log authentication attempts and expose their duration"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.3f}"

    # Health probes are too frequent to log
    if request.url.path.startswith("/auth/"):
        client_host = request.client.host if request.client else "-"
        logger.info(f"{request.method} {request.url.path} from {client_host} - {response.status_code} - {process_time:.3f}s")

    return response
