"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, brain, content
from src.config import get_settings
from src.database import Database
from src.errors import AppError, StoreError, ValidationError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    database = Database(settings.database_url)
    database.init()
    app.state.database = database
    yield
    database.dispose()


app = FastAPI(
    title="Brainly API",
    description="Save links to videos and posts, and share your brain publicly",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
    )
    return response


def error_response(error: AppError) -> JSONResponse:
    """Render an application error as the JSON body clients expect."""
    if error.exposes_details or settings.is_development:
        body = {"message": error.message}
        if error.details is not None and settings.is_development:
            body["details"] = error.details
    else:
        body = {"message": "Internal server error", "error": "Contact support"}
    return JSONResponse(status_code=error.status_code, content=body)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}")
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({".".join(str(p) for p in err["loc"][1:]) for err in exc.errors()} - {""})
    message = f"Missing or invalid fields: {', '.join(fields)}" if fields else None
    return error_response(ValidationError(message, details=jsonable_errors(exc)))


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Store failure on {request.method} {request.url.path}")
    return error_response(StoreError(details=str(exc)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(StoreError(details=str(exc)))


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]


# Register routers
app.include_router(auth.router)
app.include_router(content.router)
app.include_router(brain.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
