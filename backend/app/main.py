"""
Gipit candidates API - Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import structlog

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging_config import configure_logging
from app.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_payload,
)
from app.core.exceptions import GipitException, InternalError, ValidationError
from app.candidate_management.lifecycle import DisengagementScheduler
from app.candidate_management.router import router as candidate_management_router
from app.candidate_process.router import router as candidate_process_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Candidate engagement and hiring-process evaluation API",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# One-shot disengagement jobs; started and stopped with the application
app.state.disengagement_scheduler = DisengagementScheduler(
    SessionLocal, enabled=settings.ENABLE_DISENGAGEMENT_TIMERS
)

# Add middleware (last added runs first)
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GipitException)
async def gipit_exception_handler(request: Request, exc: GipitException):
    """Handle application exceptions"""
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors (400)"""
    error = ValidationError(
        "Invalid request", details={"errors": jsonable_encoder(exc.errors())}
    )
    return JSONResponse(status_code=error.status_code, content=error_payload(error))


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store faults are logged here and reported opaquely"""
    logger.exception("database_error", path=request.url.path, error=str(exc))
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error_payload(error))


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "pending_disengagements": len(app.state.disengagement_scheduler.pending()),
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


# Include routers
app.include_router(candidate_management_router)
app.include_router(candidate_process_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("application_starting", version=settings.APP_VERSION)
    app.state.disengagement_scheduler.start()

    try:
        init_db()
    except Exception as e:
        logger.error("database_init_failed", error=str(e))


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    app.state.disengagement_scheduler.shutdown()
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
