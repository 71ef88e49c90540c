"""
NFL Playoff Scenarios - FastAPI Application

Main entry point for the web API.
"""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import scenarios_router, teams_router
from .data import NFL_TEAMS

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Serving scenarios for {len(NFL_TEAMS)} teams")
    yield
    # Shutdown


# Create FastAPI app
app = FastAPI(
    title="NFL Playoff Scenarios",
    description="Standings, tiebreakers, playoff brackets, magic numbers and draft order for NFL seasons.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# CORS configuration
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(teams_router, prefix="/api")
app.include_router(scenarios_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "NFL Playoff Scenarios API",
        "version": __version__,
        "docs": "/api/docs",
        "health": "/api/health"
    }
