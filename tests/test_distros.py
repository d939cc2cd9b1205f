"""Tests for the stemcell distro table."""

import pytest

from hub.stemcell import (
    Distro,
    StemcellOSMatch,
    all_distros,
    all_infrastructures,
    find_distro,
    find_distro_for_os,
)


class TestDistroTable:
    """Tests for the static table."""

    def test_sorted_by_sort_key(self):
        names = [d.name_name for d in all_distros()]

        assert names == ["ubuntu-trusty", "windows2016", "windows2012R2", "centos-7"]

    def test_ubuntu_supports_all_infrastructures(self):
        ubuntu = find_distro("ubuntu-trusty")

        assert [i.name for i in ubuntu.supported_infrastructures] == [
            i.name for i in all_infrastructures()
        ]

    def test_windows2016_infrastructures(self):
        windows = find_distro("windows2016")

        assert windows.supports("google")
        assert windows.supports("azure")
        assert not windows.supports("aws")

    def test_records_immutable(self):
        distro = find_distro("centos-7")

        with pytest.raises(Exception):  # FrozenInstanceError
            distro.sort = 10


class TestLookup:
    """Tests for distro lookups."""

    def test_find_unknown(self):
        assert find_distro("plan9") is None

    @pytest.mark.parametrize("os_name,os_version,expected", [
        ("ubuntu", "trusty", "ubuntu-trusty"),
        ("windows", "2012R2", "windows2012R2"),
        ("centos", "7", "centos-7"),
    ])
    def test_find_for_os(self, os_name, os_version, expected):
        assert find_distro_for_os(os_name, os_version).name_name == expected

    def test_find_for_unknown_os(self):
        assert find_distro_for_os("ubuntu", "xenial") is None

    def test_matches(self):
        distro = Distro(
            name_name="x",
            name="X",
            os_matches=(StemcellOSMatch("x", "1"), StemcellOSMatch("x", "2")),
            supported_infrastructures=(),
            sort=9,
        )

        assert distro.matches("x", "2")
        assert not distro.matches("x", "3")

    def test_to_dict(self):
        data = find_distro("windows2016").to_dict()

        assert data == {
            "name_name": "windows2016",
            "name": "Windows 2016",
            "os_matches": [{"os_name": "windows", "os_version": "2016"}],
            "supported_infrastructures": ["google", "azure"],
            "sort": 2,
        }
