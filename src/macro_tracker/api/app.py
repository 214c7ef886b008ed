"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.admin import router as admin_router
from macro_tracker.api.drawers import router as drawers_router
from macro_tracker.api.foods import router as foods_router
from macro_tracker.api.me import router as me_router
from macro_tracker.api.meals import router as meals_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import (
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
)

_ERROR_STATUS = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(foods_router)
    app.include_router(me_router)
    app.include_router(drawers_router)
    app.include_router(admin_router)

    async def domain_error(request: Request, exc: Exception) -> JSONResponse:
        status_code = next(
            code
            for error_type, code in _ERROR_STATUS.items()
            if isinstance(exc, error_type)
        )
        logger.info(
            "Rejected request",
            extra={"path": request.url.path, "status_code": status_code},
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    for error_type in _ERROR_STATUS:
        app.add_exception_handler(error_type, domain_error)

    @app.get("/health")
    async def health(request: Request) -> JSONResponse:
        """Liveness check that performs a trivial read against Supabase."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.profile_service.check_health()
        except Exception as exc:
            logger.exception("Health check failed")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "status": "error",
                    "message": str(exc) or "An unexpected error occurred",
                    "error": type(exc).__name__,
                },
            )
        return JSONResponse(
            {"status": "ok", "message": "Supabase connection is healthy"}
        )

    return app
