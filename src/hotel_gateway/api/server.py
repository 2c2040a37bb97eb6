"""FastAPI server exposing hotels to eligible ticket holders."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings
from ..errors import GatewayError, UnauthorizedError
from ..utils.logging_config import setup_logging
from .routers import hotels

logger = logging.getLogger(__name__)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Translate domain errors into their HTTP status."""
    if isinstance(exc, UnauthorizedError):
        logger.warning(f"{request.method} {request.url.path} unauthorized: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; loaded from the environment if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings.from_environment()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Hotel Gateway API",
        description="Lists event hotels for users whose paid ticket includes lodging",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.include_router(hotels.router)

    @app.get("/health")
    async def health():
        """Liveness probe."""
        return {"status": "ok"}

    logger.info(f"Hotel Gateway API configured with database {settings.database_path}")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
