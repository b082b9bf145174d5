"""
DocuPrint API - Main Application Entry Point

This module initializes and configures the FastAPI application including:
- Database (and optional Redis) connections
- Demo data seeding
- Background job scheduler
- CORS middleware
- Error envelope ({"error", "code"}) and API routing
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docuprint.api import api_router
from docuprint.core.config import settings
from docuprint.core.database import close_db, init_db, session_scope
from docuprint.core.exceptions import ServiceError, format_validation_errors
from docuprint.core.redis import close_redis, init_redis
from docuprint.core.scheduler import start_scheduler, stop_scheduler
from docuprint.modules.admins.seed import seed_admin_accounts
from docuprint.modules.otp.jobs import register_otp_jobs

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events including:
    - Redis connection
    - Database tables and demo data
    - Background job scheduler
    """
    # Startup
    print(f"Starting DocuPrint API in {settings.python_env} mode...")

    # Initialize Redis (optional)
    try:
        await init_redis()
        print("[OK] Redis connected" if settings.redis_url else "[OK] Redis not configured, using memory")
    except Exception as e:
        print(f"[FAIL] Redis connection failed: {e}")
        if settings.is_production:
            raise

    # Initialize Database
    try:
        await init_db()
        print("[OK] Database connected")
    except Exception as e:
        print(f"[FAIL] Database connection failed: {e}")
        raise

    if settings.seed_demo_data:
        try:
            async with session_scope() as db:
                created = await seed_admin_accounts(db)
            print(f"[OK] Demo admins seeded ({len(created)} new)")
        except Exception as e:
            print(f"[FAIL] Seeding demo admins failed: {e}")
            if settings.is_production:
                raise

    # Initialize Background Job Scheduler
    if settings.scheduler_enabled:
        try:
            # Register jobs before starting the scheduler
            register_otp_jobs()

            await start_scheduler()
            print("[OK] Background scheduler started")
        except Exception as e:
            print(f"[FAIL] Background scheduler failed to start: {e}")
            if settings.is_production:
                raise

    yield  # Application runs here

    # Shutdown
    print("Shutting down DocuPrint API...")

    # Stop the scheduler first (wait for running jobs)
    await stop_scheduler()
    print("[OK] Background scheduler stopped")

    await close_redis()
    await close_db()
    print("[OK] Cleanup complete")


app = FastAPI(
    title=settings.app_name,
    description="Gated-community document printing portal API",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.include_router(api_router, prefix=settings.api_prefix)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================
# Error envelope
# ============================================
# Routers raise HTTPException(detail={"error": code, "message": msg}).
# Clients receive {"error": msg, "code": code}.


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = {
            "error": exc.detail.get("message", "Request failed"),
            "code": exc.detail.get("error"),
        }
    else:
        content = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": format_validation_errors(exc.errors()), "code": "VALIDATION_ERROR"},
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.warning(f"Unhandled service error on {request.url.path}: {exc.error_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.error_code},
    )


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to DocuPrint API",
        "status": "running",
        "environment": settings.python_env,
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    """Readiness check endpoint."""
    return {"status": "ready"}


# ============================================
# Background Job Debug Endpoints
# ============================================


@app.get("/debug/jobs", tags=["Debug"])
async def list_jobs():
    """List registered background jobs and their next run time."""
    from docuprint.core.scheduler import list_registered_jobs

    return {"jobs": list_registered_jobs()}


@app.post("/debug/jobs/{job_id}/trigger", tags=["Debug"])
async def trigger_job(job_id: str):
    """
    Run a background job now, bypassing its schedule.

    Args:
        job_id: The ID of the job to trigger, e.g. otp_purge_expired

    Raises:
        HTTPException 400: If job_id is not registered
    """
    from docuprint.core.scheduler import trigger_job_manually

    try:
        return await trigger_job_manually(job_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
