"""
Cache administration API routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header

from hub.config import Config
from hub.dependencies import get_config, get_filesystem
from hub.exceptions import AuthorizationException
from hub.system.caching_filesystem import CachingFileSystem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cache", tags=["cache"])


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    config: Config = Depends(get_config),
) -> None:
    """Reject the request unless X-Api-Key matches the configured APIKey.

    An empty APIKey in the config leaves the endpoint open.
    """
    if config.api_key and x_api_key != config.api_key:
        raise AuthorizationException("Invalid or missing API key")


@router.get("")
def cache_stats(fs: CachingFileSystem = Depends(get_filesystem)):
    """Report how many reads and glob results are cached."""
    return fs.stats()


@router.post("/drop", dependencies=[Depends(require_api_key)])
def drop_cache(fs: CachingFileSystem = Depends(get_filesystem)):
    """Drop every cached read and glob result."""
    logger.info("Cache drop requested via API")
    fs.drop_cache()
    return {"status": "dropped"}
