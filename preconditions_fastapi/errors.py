from __future__ import annotations

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from preconditions import PreconditionError
from preconditions_fastapi.config import Settings
from preconditions_fastapi.logging import get_logger, setup_logging
from preconditions_fastapi.models import ErrorResponse

_logger = get_logger(__name__)


def _settings_for(request: Request) -> Settings:
    state = getattr(request.scope.get("app"), "state", None)
    settings = getattr(state, "precondition_settings", None)
    if isinstance(settings, Settings):
        return settings
    return Settings.from_env()


async def precondition_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    if not isinstance(exc, PreconditionError):
        raise exc
    settings = _settings_for(request)
    path = str(request.url.path)
    _logger.warning(
        "Precondition failed: %s",
        exc,
        extra={"error_code": exc.code, "path": path},
    )
    payload = ErrorResponse(
        error=str(exc) or type(exc).__name__,
        code=exc.code,
        details={"type": type(exc).__name__} if settings.include_details else None,
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(
        status_code=settings.error_status, content=payload.model_dump(mode="json")
    )


def install(app: FastAPI, settings: Settings | None = None) -> None:
    """Register the precondition handler on ``app`` and configure logging."""
    resolved = settings if settings is not None else Settings.from_env()
    setup_logging(resolved.log_level)
    app.state.precondition_settings = resolved
    app.add_exception_handler(PreconditionError, precondition_exception_handler)
