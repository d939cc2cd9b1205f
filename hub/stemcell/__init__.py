"""Stemcell metadata."""

from hub.stemcell.distros import (
    Distro,
    Infrastructure,
    StemcellOSMatch,
    all_distros,
    all_infrastructures,
    find_distro,
    find_distro_for_os,
)

__all__ = [
    "Distro",
    "Infrastructure",
    "StemcellOSMatch",
    "all_distros",
    "all_infrastructures",
    "find_distro",
    "find_distro_for_os",
]
