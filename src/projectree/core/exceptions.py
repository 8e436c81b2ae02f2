"""Project error taxonomy and the exception handlers that render it."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.projectree.core.logging import get_logger

logger = get_logger(__name__)


class ProjectError(Exception):
    """Base error for project operations. Carries the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationError(ProjectError):
    """Bearer credential missing, malformed, expired or of the wrong type."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class AuthorizationError(ProjectError):
    """Subject is neither owner nor collaborator of the project."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class ProjectValidationError(ProjectError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class ProjectNotFoundError(ProjectError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Project not found"


class StoreError(ProjectError):
    """A relational or document store operation failed at the driver level."""

    default_detail = "Store operation failed"


class ConsistencyError(ProjectError):
    """The two stores disagree about a project that should exist in both."""

    default_detail = "Project is empty"


def _error_body(detail: str) -> dict[str, str | None]:
    return {"detail": detail, "request_id": correlation_id.get()}


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(ProjectError)
    async def project_error_handler(request: Request, exc: ProjectError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Project operation failed",
                error=type(exc).__name__,
                detail=exc.detail,
                path=request.url.path,
            )
        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail),
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )
