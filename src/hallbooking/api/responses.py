"""
Shared failure response for unexpected errors
"""
import logging
from typing import Optional

from fastapi.responses import JSONResponse

from hallbooking.core.errors import StoreError
from hallbooking.core.metrics import request_failures_total

logger = logging.getLogger(__name__)


def internal_failure(endpoint: str, message: str, error: Exception,
                     ok: Optional[bool] = None) -> JSONResponse:
    """
    Log and count an unexpected failure, answer with a generic 500.

    The caller only ever sees `message`; the error kind and cause stay in
    logs and metrics.
    """
    kind = error.kind if isinstance(error, StoreError) else "unexpected"
    request_failures_total.labels(endpoint=endpoint, kind=kind).inc()

    logger.error(
        f"{endpoint} failed: {kind}",
        extra={'endpoint': endpoint, 'error_kind': kind},
        exc_info=error,
    )

    content = {"message": message}
    if ok is not None:
        content["ok"] = ok
    return JSONResponse(status_code=500, content=content)
