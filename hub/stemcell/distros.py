"""
Known stemcell distributions and the infrastructures they are built for.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Infrastructure:
    name: str
    title: str


@dataclass(frozen=True)
class StemcellOSMatch:
    os_name: str
    os_version: str


@dataclass(frozen=True)
class Distro:
    """A family of stemcells sharing an OS."""

    name_name: str
    name: str
    os_matches: Tuple[StemcellOSMatch, ...]
    supported_infrastructures: Tuple[Infrastructure, ...]
    sort: int

    def matches(self, os_name: str, os_version: str) -> bool:
        """Check whether a stemcell with this OS belongs to the distro."""
        return StemcellOSMatch(os_name, os_version) in self.os_matches

    def supports(self, infrastructure_name: str) -> bool:
        return any(i.name == infrastructure_name for i in self.supported_infrastructures)

    def to_dict(self) -> dict:
        return {
            "name_name": self.name_name,
            "name": self.name,
            "os_matches": [
                {"os_name": m.os_name, "os_version": m.os_version}
                for m in self.os_matches
            ],
            "supported_infrastructures": [i.name for i in self.supported_infrastructures],
            "sort": self.sort,
        }


AWS = Infrastructure(name="aws", title="AWS")
GOOGLE = Infrastructure(name="google", title="Google Cloud Platform")
AZURE = Infrastructure(name="azure", title="Azure")
OPENSTACK = Infrastructure(name="openstack", title="OpenStack")
VSPHERE = Infrastructure(name="vsphere", title="vSphere")
WARDEN = Infrastructure(name="warden", title="BOSH Lite")

_ALL_INFRASTRUCTURES = (AWS, GOOGLE, AZURE, OPENSTACK, VSPHERE, WARDEN)

UBUNTU_TRUSTY = Distro(
    name_name="ubuntu-trusty",
    name="Ubuntu Trusty",
    os_matches=(StemcellOSMatch("ubuntu", "trusty"),),
    supported_infrastructures=_ALL_INFRASTRUCTURES,
    sort=1,
)

WINDOWS_2016 = Distro(
    name_name="windows2016",
    name="Windows 2016",
    os_matches=(StemcellOSMatch("windows", "2016"),),
    supported_infrastructures=(GOOGLE, AZURE),
    sort=2,
)

WINDOWS_2012R2 = Distro(
    name_name="windows2012R2",
    name="Windows 2012R2",
    os_matches=(StemcellOSMatch("windows", "2012R2"),),
    supported_infrastructures=(AWS, GOOGLE, AZURE),
    sort=3,
)

CENTOS_7 = Distro(
    name_name="centos-7",
    name="CentOS 7",
    os_matches=(StemcellOSMatch("centos", "7"),),
    supported_infrastructures=(AWS, GOOGLE, AZURE, OPENSTACK, VSPHERE, WARDEN),
    sort=4,
)

_ALL_DISTROS = (UBUNTU_TRUSTY, WINDOWS_2016, WINDOWS_2012R2, CENTOS_7)


def all_infrastructures() -> List[Infrastructure]:
    return list(_ALL_INFRASTRUCTURES)


def all_distros() -> List[Distro]:
    """Return every known distro ordered by its sort key."""
    return sorted(_ALL_DISTROS, key=lambda d: d.sort)


def find_distro(name_name: str) -> Optional[Distro]:
    for distro in _ALL_DISTROS:
        if distro.name_name == name_name:
            return distro
    return None


def find_distro_for_os(os_name: str, os_version: str) -> Optional[Distro]:
    """Find the distro a stemcell with the given OS belongs to."""
    for distro in all_distros():
        if distro.matches(os_name, os_version):
            return distro
    return None
