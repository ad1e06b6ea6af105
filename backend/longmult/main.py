"""
Long Multiplication Calculator
Main FastAPI application entry point
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import sys
import time
from contextlib import asynccontextmanager

from longmult import __version__
from longmult.config import get_settings
from longmult.gateway.router import router as gateway_router
from longmult.logging import setup_logging
from longmult.models.schemas import HealthCheckResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    settings = get_settings()
    setup_logging(settings.log_level, sys.stdout)
    logger = logging.getLogger(__name__)
    logger.info("Starting Long Multiplication Calculator")

    yield

    # Shutdown
    logger.info("Shutting down Long Multiplication Calculator")


app = FastAPI(
    title="Long Multiplication Calculator",
    description="Step-by-step long multiplication rendered as plain text",
    version=__version__,
    lifespan=lifespan
)

# The static front-end calls the gateway from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.get("/healthz", response_model=HealthCheckResponse)
async def health_check():
    """Health check endpoint"""
    return HealthCheckResponse(status="healthy", service="long-multiplication", version=__version__)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Long Multiplication Calculator",
        "version": __version__,
        "usage": "/multiply/5,79,plain,yes",
        "docs": "/docs"
    }


app.include_router(gateway_router, prefix="/multiply", tags=["multiply"])


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger = logging.getLogger(__name__)
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "longmult.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_dev
    )
