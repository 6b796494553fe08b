"""FastAPI application."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .models import HealthResponse
from .routers import display, sampling

VERSION = "1.0.0"


def setup_logging() -> None:
    """Configure the root logger from settings."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # Console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))
    root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts, not when the module is imported."""
    setup_logging()
    yield


# Create FastAPI app
app = FastAPI(
    title="Chart Engine API",
    description="Downsampling, level-of-detail and renderer selection for time-series charts",
    version=VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sampling.router, prefix="/sampling", tags=["sampling"])
app.include_router(display.router, prefix="/display", tags=["display"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint redirect to docs."""
    return {"message": "Chart Engine API - visit /docs for API documentation"}


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=VERSION)
