# ============================================================================
# FILE: app/main.py
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.api.v1.router import api_router
from app.core.errors import AppError, Unauthenticated, ValidationError
from app.core.logging import setup_logging
from app.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Playlists, listening history and Audius search behind a bearer token",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Map service errors to status-coded JSON bodies"""
    body = {"error": exc.message}
    headers = None
    if isinstance(exc, ValidationError):
        body["field"] = exc.field
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request input gets the same 400 shape as service validation"""
    error = exc.errors()[0]
    loc = error.get("loc") or ("body",)
    field = str(loc[-1])
    if error.get("type") == "missing":
        message = f"{field} is required"
    else:
        message = f"{field}: {error.get('msg')}"
    return JSONResponse(status_code=400, content={"error": message, "field": field})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log everything else and hide the details from the caller"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal error"})

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info(f"Starting {settings.APP_NAME}")
    # Create database tables if they do not exist yet
    from app.db.base import Base
    from app.db.session import engine
    from app.db import models  # noqa: F401
    Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME}")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": "1.0.0", "docs": "/docs"}
