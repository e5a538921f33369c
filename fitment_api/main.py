"""FastAPI application for the wheel fitment adapter."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routes import router
from .core.config import get_settings, validate_settings
from .core.dependencies import get_openai_completion_client
from .core.errors import FitmentError
from .core.logging import (
    log_error,
    log_request,
    log_response,
    logger,
    setup_logging,
)

# Sent on every response, including errors
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - validate configuration on startup."""
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        validate_settings()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise
    logger.info(f"Starting Wheel Fitment API model={settings.openai_model}")
    yield
    logger.info("Shutting down...")
    if get_openai_completion_client.cache_info().currsize:
        await get_openai_completion_client(settings.openai_api_key).close()
        get_openai_completion_client.cache_clear()


app = FastAPI(
    title="Wheel Fitment API",
    description="OEM and upgrade wheel/tire fitment for a vehicle, sourced from an LLM",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# -----------------------------------------------------------------------------
# Middleware
# -----------------------------------------------------------------------------


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    log_request(request.method, request.url.path)

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    log_response(request.method, request.url.path, response.status_code, duration_ms)

    return response


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------


@app.exception_handler(FitmentError)
async def fitment_error_handler(request: Request, exc: FitmentError):
    if exc.status_code >= 500:
        log_error(exc.error, exc, path=request.url.path)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    # Runs outside the middleware stack, so CORS headers are added here
    log_error("Unhandled exception", exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": str(exc)},
        headers=CORS_HEADERS,
    )


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

app.include_router(router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "ok", "service": "wheel-fitment-api"}
