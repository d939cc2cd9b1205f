"""
API routes package.
"""

from hub.api.routes.cache import router as cache_router
from hub.api.routes.manifests import router as manifests_router
from hub.api.routes.stemcells import router as stemcells_router

__all__ = ["cache_router", "manifests_router", "stemcells_router"]
