"""
Stemcell Hub - Main FastAPI Application

Serves stemcell distro metadata and release manifests. All file access goes
through a CachingFileSystem; the caches are dropped on SIGHUP, on a timer,
or through the cache admin endpoint.
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from hub import __version__
from hub.api.routes import cache_router, manifests_router, stemcells_router
from hub.config import Settings, get_settings, load_config
from hub.dependencies import get_filesystem
from hub.exceptions import HubException, hub_exception_handler
from hub.system.caching_filesystem import CachingFileSystem
from hub.system.reload import install_reload_signal, periodic_drop, remove_reload_signal

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info("Starting Stemcell Hub")
    logger.info(f"Config path: {settings.config_path}")

    fs = get_filesystem()
    config = await asyncio.to_thread(load_config, settings.config_path, fs)
    logger.info(f"Repos: type={config.repos.type} dir={config.repos.dir}")

    sighup_installed = False
    if settings.reload_on_sighup:
        try:
            install_reload_signal(fs)
            sighup_installed = True
        except (RuntimeError, NotImplementedError):
            logger.warning("Signal handlers unavailable, SIGHUP reload disabled")

    drop_task = None
    if settings.cache_drop_interval > 0:
        drop_task = asyncio.create_task(periodic_drop(fs, settings.cache_drop_interval))

    yield

    if drop_task is not None:
        drop_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await drop_task

    if sighup_installed:
        remove_reload_signal()

    logger.info("Shutting down Stemcell Hub")


# Create FastAPI application
app = FastAPI(
    title="Stemcell Hub",
    description="Stemcell distro metadata and release manifests, served from a cached filesystem.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_exception_handler(HubException, hub_exception_handler)

# Include routers
app.include_router(stemcells_router, prefix="/api")
app.include_router(manifests_router, prefix="/api")
app.include_router(cache_router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Stemcell Hub",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", tags=["health"])
def health(
    settings: Settings = Depends(get_settings),
    fs: CachingFileSystem = Depends(get_filesystem),
):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "config_exists": fs.file_exists(settings.config_path),
        "cache": fs.stats(),
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
