"""
Stemcell distro API routes.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from hub.exceptions import NotFoundException
from hub.stemcell import all_distros, find_distro

router = APIRouter(prefix="/stemcells", tags=["stemcells"])


class OSMatchInfo(BaseModel):
    os_name: str
    os_version: str


class DistroInfo(BaseModel):
    """Public view of a stemcell distro."""
    name_name: str
    name: str
    os_matches: list[OSMatchInfo]
    supported_infrastructures: list[str]
    sort: int


@router.get("/distros", response_model=list[DistroInfo])
def list_distros():
    """List known stemcell distros in display order."""
    return [distro.to_dict() for distro in all_distros()]


@router.get("/distros/{name}", response_model=DistroInfo)
def get_distro(name: str):
    """Get a single distro by its short name (e.g. ``ubuntu-trusty``)."""
    distro = find_distro(name)
    if distro is None:
        raise NotFoundException(f"Distro not found: {name}", details={"name": name})
    return distro.to_dict()
