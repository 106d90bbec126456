"""Translation of domain errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from eventledger.domain.errors import (
    AccountNotFoundError,
    DomainError,
    DuplicateAccountNumberError,
    InsufficientBalanceError,
    InvalidAccountNumberError,
    InvalidAmountError,
    RepositoryError,
    TransactionNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: tuple[tuple[type[DomainError], int], ...] = (
    (AccountNotFoundError, 404),
    (TransactionNotFoundError, 404),
    (DuplicateAccountNumberError, 409),
    (InvalidAmountError, 422),
    (InvalidAccountNumberError, 422),
    (InsufficientBalanceError, 422),
    (ValidationError, 422),
    (RepositoryError, 500),
)


def status_code_for(exc: DomainError) -> int:
    for error_type, status_code in _STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("API error on %s %s: %s", request.method, request.url.path, exc)
    else:
        logger.info("Request rejected on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
