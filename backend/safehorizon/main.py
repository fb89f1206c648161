"""
SafeHorizon Backend - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (translation, speech generation, audio/video localization)
- Static retrieval of generated audio under /public
- Mapping of service errors to {"error": message} responses
"""
from contextlib import asynccontextmanager
import logging
import os
from datetime import datetime, UTC

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from safehorizon.api import router as api_router
from safehorizon.api.deps import close_translation_service
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import SafeHorizonError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# StaticFiles needs the directory at mount time
os.makedirs(settings.PUBLIC_DIR, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # === STARTUP ===
    logger.info("🚀 Starting SafeHorizon Backend...")
    os.makedirs(settings.UPLOADS_DIR, exist_ok=True)
    os.makedirs(settings.PUBLIC_DIR, exist_ok=True)
    logger.info(f"✅ Uploads dir: {settings.UPLOADS_DIR}, public dir: {settings.PUBLIC_DIR}")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("🛑 Shutting down...")
    close_translation_service()


app = FastAPI(
    title="SafeHorizon Backend",
    description="Text translation, audio localization and video localization",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SafeHorizonError)
async def handle_service_error(request: Request, exc: SafeHorizonError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {errors}"})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


# Include REST API routes
app.include_router(api_router, prefix="/api")

# Generated artifacts
app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "SafeHorizon",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
    }


if __name__ == "__main__":
    uvicorn.run(
        "safehorizon.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
