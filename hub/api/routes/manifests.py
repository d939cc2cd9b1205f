"""
Manifest API routes.

Handlers are plain functions so FastAPI runs them in its threadpool; the
caching filesystem behind the repository serializes access per cache.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from hub.dependencies import get_manifest_repository
from hub.exceptions import NotFoundException
from hub.repositories.manifest_repository import ManifestRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/manifests", tags=["manifests"])


class ManifestListResponse(BaseModel):
    """Response for manifest listing."""
    names: list[str]
    total: int


class ManifestResponse(BaseModel):
    """Single manifest response."""
    name: str
    manifest: dict


@router.get("", response_model=ManifestListResponse)
def list_manifests(repo: ManifestRepository = Depends(get_manifest_repository)):
    """List manifest names available in the repos directory."""
    names = repo.list_names()
    return ManifestListResponse(names=names, total=len(names))


@router.get("/{name}", response_model=ManifestResponse)
def get_manifest(name: str, repo: ManifestRepository = Depends(get_manifest_repository)):
    """Return a manifest's decoded content."""
    manifest = repo.get(name)
    if manifest is None:
        raise NotFoundException(f"Manifest not found: {name}", details={"name": name})
    return ManifestResponse(name=name, manifest=manifest)
