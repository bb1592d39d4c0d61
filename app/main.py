"""
DrivewayDash API - Snow-Clearing Job Marketplace
FastAPI Backend Entry Point
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.database import init_db, ping_db
from app.api import jobs
from app.models.job import CITIES, JobStatus, JobType
from app.schemas.job import MetaResponse

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(f"Starting {settings.APP_NAME}...")
    init_db()
    yield
    logger.info(f"Shutting down {settings.APP_NAME}...")


app = FastAPI(
    title=settings.APP_NAME,
    description="Marketplace matching homeowners with helpers for snow clearing",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Return errors as {"error": message}, the shape the client expects."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Include routers
app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])


@app.get("/api/meta", response_model=MetaResponse, tags=["Meta"])
def meta():
    """Cities, job types and statuses the client offers, plus its refresh period."""
    return MetaResponse(
        cities=CITIES,
        job_types=[t.value for t in JobType],
        statuses=[s.value for s in JobStatus],
        poll_interval_seconds=settings.POLL_INTERVAL_SECONDS,
    )


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint. Reports database reachability."""
    status = {
        "status": "healthy",
        "version": "0.1.0",
        "services": {},
    }

    try:
        ping_db()
        status["services"]["database"] = "ok"
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        status["services"]["database"] = f"error: {str(e)}"
        status["status"] = "degraded"

    return status


@app.get("/", tags=["Root"])
def root():
    """Root endpoint."""
    return {
        "message": "DrivewayDash API - Snow-Clearing Job Marketplace",
        "docs": "/docs",
        "health": "/health",
        "jobs": "/api/jobs",
    }
