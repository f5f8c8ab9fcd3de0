"""
Workout Tracker Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workout_tracker import __version__
from workout_tracker.core.config import settings
from workout_tracker.core.logging import setup_logging, get_logger
from workout_tracker.core.database import init_db
from workout_tracker.api import stats, workouts

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    logger.info("Starting Workout Tracker Backend", version=__version__)
    await init_db()
    logger.info("Database initialized", storage_key=settings.WORKOUTS_STORAGE_KEY)

    yield

    # Shutdown
    logger.info("Shutting down Workout Tracker Backend")


app = FastAPI(
    title="Workout Tracker API",
    description="Log workouts and view totals and charts over your history",
    version=__version__,
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

# Include routers
app.include_router(workouts.router, prefix="/api/workouts", tags=["workouts"])
app.include_router(stats.router, prefix="/api/stats", tags=["stats"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "workout-tracker"}
