from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class FacadeError(Exception):
    """
    Base error for everything the API reports to the browser.

    Rendered as a flat JSON envelope: {"error": ..., "details": ..., "status": ...}
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error: str,
        details: Optional[str] = None,
        upstream_status: Optional[int] = None,
    ):
        super().__init__(error)
        self.error = error
        self.details = details
        self.upstream_status = upstream_status

    def to_envelope(self) -> Dict[str, Any]:
        envelope: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            envelope["details"] = self.details
        if self.upstream_status is not None:
            envelope["status"] = self.upstream_status
        return envelope


class QueryFailedError(FacadeError):
    """The warehouse rejected or failed to run a query."""


class TokenFetchError(FacadeError):
    """The token endpoint answered with a non-2xx status."""


class TokenExchangeError(FacadeError):
    """The token request never got an answer (DNS, TLS, connection reset...)."""


class InvalidParameterError(FacadeError):
    status_code = status.HTTP_400_BAD_REQUEST


async def facade_error_handler(request: Request, exc: FacadeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


# Missing or non-numeric query parameters never reach the warehouse
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "query")
        problems.append(f"{location}: {err.get('msg')}")

    error = InvalidParameterError(
        "invalid query parameters", details="; ".join(problems)
    )
    return JSONResponse(status_code=error.status_code, content=error.to_envelope())
