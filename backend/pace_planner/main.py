"""
Pace Planner API

FastAPI application for running pace strategies and splits.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pace_planner import __version__
from pace_planner.config import settings
from pace_planner.api.v1.router import api_router
from pace_planner.shared.formatters import format_clock


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Pace Planner API...")
    logger.info(
        f"Defaults: distance={settings.default_distance.value} "
        f"time={format_clock(settings.default_target_seconds)}"
    )

    yield

    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Pace Planner API",
    description="Running pace strategies and kilometer splits for a target time",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
