"""Domain errors and the single translator that turns them into HTTP responses.

Route handlers raise; they never build error responses themselves.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class GroupApiError(Exception):
    """Base class for errors that map onto a fixed HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class BadCredentialsError(GroupApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "The provided credentials are incorrect"


class OwnershipError(GroupApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "The client does not own the requested resource"


class DocumentNotFoundError(GroupApiError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "The requested resource was not found"


class BadParamsError(GroupApiError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    detail = "A required parameter was omitted or invalid"


def handle_404(record):
    """Return `record`, or raise DocumentNotFoundError when the lookup found nothing."""
    if record is None:
        raise DocumentNotFoundError()
    return record


def require_ownership(user, record) -> None:
    """Raise OwnershipError unless `user` owns `record`."""
    if record.owner_id != user.user_id:
        logger.info("User %s denied mutation of resource owned by %s", user.user_id, record.owner_id)
        raise OwnershipError()


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-to-response translators on `app`."""

    @app.exception_handler(GroupApiError)
    async def group_api_error_handler(request: Request, exc: GroupApiError):
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)

    @app.exception_handler(SQLAlchemyError)
    async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Persistence error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
