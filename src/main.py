"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, posts
from src.config import get_settings
from src.exceptions import BlogError, ServerError

logger = logging.getLogger(__name__)
settings = get_settings()


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info(f"Starting blog API ({settings.environment})")
    yield


app = FastAPI(
    title="Blog API",
    description="Multi-user blogging backend with bearer token authentication",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError) -> JSONResponse:
    """Translate service error kinds into JSON responses."""
    detail = exc.detail
    if isinstance(exc, ServerError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
        detail = ServerError.default_detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report missing or malformed request fields as 400."""
    # Submitted values are not echoed back
    errors = [
        {key: value for key, value in error.items() if key != "input"} for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log unexpected database failures without exposing them."""
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": ServerError.default_detail},
    )


# Register routers
app.include_router(auth.router)
app.include_router(posts.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API on the configured host and port."""
    configure_logging(settings.log_level)
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
