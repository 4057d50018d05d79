"""
Error responses.

Every error body has the same shape: {"message": "..."}. Ledger
errors carry their own status code; malformed request bodies are
reported as 400 like any other validation failure.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ledgerx.exceptions import LedgerError

logger = logging.getLogger(__name__)


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    logger.warning(
        "%s %s failed: %s", request.method, request.url.path, exc.message
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(
        "%s %s rejected: %s", request.method, request.url.path, problems
    )
    return JSONResponse(
        status_code=400, content={"message": f"Invalid request: {problems}"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
