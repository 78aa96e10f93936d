"""Request logging middleware.

Every request gets a request id: the caller's X-Request-ID header when
present, a fresh `req_<12 hex>` otherwise. The id is stored on
request.state for the response envelope and echoed back as a header.

Log format (level follows the status class):
    INFO    [POST] /api/v1/pool/deposit → 200 (2ms) req_a1b2c3d4e5f6
    WARNING [POST] /api/v1/pool/withdraw → 422 (1ms) req_0f9e8d7c6b5a
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.sp_common.response import new_request_id

logger = logging.getLogger("sp.request")

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.log(
            _level_for(response.status_code),
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
