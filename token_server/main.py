"""Room Token Server - Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .routers import token
from .signing.factory import get_token_signer

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    logger.info("Starting Room Token Server")

    # Fail at startup on an unknown provider instead of on every request
    signer = get_token_signer()
    logger.info(f"Token provider: {settings.token_provider} ({type(signer).__name__})")
    logger.info(f"Token TTL: {settings.token_ttl_seconds}s")
    if not settings.credentials_configured:
        logger.warning("LiveKit credentials are not configured; token requests will fail")

    routes = [f"{route.methods} {route.path}" for route in app.routes if hasattr(route, "methods")]
    logger.info(f"Registered routes: {routes}")

    yield
    logger.info("Shutting down Room Token Server")


# Create FastAPI application
app = FastAPI(
    title="Room Token Server",
    description="Mints LiveKit access tokens for a room and user",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(token.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": "Room Token Server",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, str | bool]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "credentials_configured": settings.credentials_configured,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "token_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
