import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from school.api.router import api_router
from school.core.config import settings
from school.core.exceptions import SchoolError, status_code_for
from school.core.logging import logger
from school.schemas import ErrorResponse


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )

    # Set up CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    application.include_router(api_router)

    # Register exception handlers
    register_exception_handlers(application)

    return application


def error_response(status_code: int, message: str, details: list) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _field_name(loc: tuple) -> str:
    """``("body", "name")`` -> ``name``; path and query locations keep their last part."""
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else str(loc[-1])


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(SchoolError)
    async def school_error_handler(request: Request, exc: SchoolError) -> JSONResponse:
        """Domain errors: status decided by the error code."""
        status_code = status_code_for(exc.error_code)
        if status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message} ({request.method} {request.url.path})")
            if exc.__cause__ is not None:
                logger.error(f"   Caused by: {exc.__cause__.__class__.__name__}: {exc.__cause__}")
        else:
            logger.warning(f"{exc.error_code}: {exc.message}")

        return error_response(status_code, exc.message, [exc.error_code])

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Field errors -> structured 400; malformed JSON and missing params -> plain-text 400."""
        errors = exc.errors()

        for error in errors:
            loc = tuple(error.get("loc", ()))
            if error.get("type") == "json_invalid":
                reason = error.get("ctx", {}).get("error", error.get("msg"))
                return PlainTextResponse(f"Invalid JSON format: {reason}", status_code=400)
            if error.get("type") == "missing" and loc == ("body",):
                return PlainTextResponse(
                    "Invalid JSON format: Required request body is missing", status_code=400
                )
            if error.get("type") == "missing" and loc and loc[0] == "query":
                return PlainTextResponse(
                    f"Missing required parameter: {loc[-1]}", status_code=400
                )

        details = [f"{_field_name(tuple(e.get('loc', ())))}: {e.get('msg')}" for e in errors]
        logger.warning(f"Validation failed for {request.method} {request.url.path}: {details}")
        return error_response(400, "Validation Failed", details)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler - logs details, never leaks them."""

        # Always log to console
        logger.error(f"Exception: {exc.__class__.__name__}: {exc}")

        if settings.DEBUG:
            logger.error(
                f"Request: {request.method} {request.url}\n"
                f"   Path Params: {request.path_params}\n"
                f"   Query Params: {dict(request.query_params)}\n"
                f"   Traceback:\n{traceback.format_exc()}"
            )

        return error_response(500, "Internal Server Error", ["An unexpected error occurred"])


app = create_application()


@app.on_event("startup")
async def startup_event():
    """Create tables and log startup information."""
    # Import models so they register with Base.metadata
    import school.models  # noqa: F401
    from school.core.database import engine, Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} (profile: {settings.PROFILE})")
    logger.info(f"Avatars directory: {settings.AVATARS_DIR}")
    logger.info("Database connected & tables created")
    if settings.DEBUG:
        logger.warning("DEBUG mode is ON - detailed errors will be logged to console")


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
