"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pathwise.agent.llm import GenerationClient
from pathwise.api.routes import progress, roadmaps, visualize
from pathwise.core.config import Settings, get_settings
from pathwise.core.database import Database
from pathwise.core.errors import PathwiseError
from pathwise.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    """Turn the first body/query validation error into a field-specific message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    if err.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
    field = ".".join(loc) or "body"
    if err.get("type") == "missing":
        return f"Missing required field: {field}"
    return f"Invalid field {field}: {err.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PathwiseError)
    async def pathwise_error_handler(request: Request, exc: PathwiseError) -> JSONResponse:
        logger.warning(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=exc.message,
        )
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.info("Rejected request", path=request.url.path, error=message)
        return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error", path=request.url.path, exc_info=exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_app(
    settings: Settings | None = None,
    *,
    database: Database | None = None,
    generation_client: GenerationClient | None = None,
) -> FastAPI:
    """Build the application.

    Collaborators passed in are used as-is and owned by the caller; missing
    ones are created at startup and closed at shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        configure_logging(debug=settings.DEBUG)
        logger.info(
            "Starting Pathwise",
            version=settings.APP_VERSION,
            env=settings.ENV,
            debug=settings.DEBUG,
        )
        owns_db = database is None
        if owns_db:
            app.state.db = Database.from_settings(settings)
        if generation_client is None:
            app.state.generation_client = GenerationClient.from_settings(settings)
        await app.state.db.create_all()
        yield
        # Shutdown
        logger.info("Shutting down Pathwise")
        if owns_db:
            await app.state.db.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="AI-generated learning roadmaps with progress tracking",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    if database is not None:
        app.state.db = database
    if generation_client is not None:
        app.state.generation_client = generation_client

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(roadmaps.router, prefix="/api")
    app.include_router(progress.router, prefix="/api")
    app.include_router(visualize.router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "env": settings.ENV,
        }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("pathwise.main:app", host=settings.HOST, port=settings.PORT)
