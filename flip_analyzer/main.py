"""
FastAPI application for Flip Analyzer
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flip_analyzer.api import routes_comps, routes_flip_calculator
from flip_analyzer.config import settings
from flip_analyzer.models.property_models import HealthCheck

VERSION = "1.0.0"

# Configure logging so all loggers output to console
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("flip_analyzer")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for the application.
    """
    logger.info("Starting Flip Analyzer %s", VERSION)
    yield
    logger.info("Shutting down Flip Analyzer")


# Create FastAPI app
app = FastAPI(
    title="Flip Analyzer API",
    description="""
    Comparable-sales statistics and max offer calculation for residential flips.

    ## Features
    - Median/average statistics over comparable sales
    - 30/60/90/120/180 day time buckets (exclusive or cumulative)
    - ARV estimate from price per square foot
    - Max offer solver with a reconciling cost breakdown
    """,
    version=VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(routes_comps.router)
app.include_router(routes_flip_calculator.router)


@app.get("/", tags=["root"])
async def root():
    """API info"""
    return {
        "message": "Flip Analyzer API",
        "version": VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health"
    }


@app.get("/health", response_model=HealthCheck, tags=["health"])
async def health_check():
    """
    Health check endpoint.
    """
    return HealthCheck(
        status="healthy",
        timestamp=datetime.now(),
        version=VERSION
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting server on %s:%s", settings.host, settings.port)

    uvicorn.run(
        "flip_analyzer.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
