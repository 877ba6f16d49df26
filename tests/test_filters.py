import pytest

from nvmefabrics.filters import (
    ctrls_filter,
    namespace_filter,
    paths_filter,
    scan_ctrl_namespace_paths,
    scan_ctrl_namespaces,
    scan_ctrls,
    scan_subsystem_namespaces,
    scan_subsystems,
    subsys_filter,
)

NAMES = [
    "nvme0",
    "nvme1",
    "nvme0n1",
    "nvme0n2",
    "nvme0c0n1",
    "nvme-subsys0",
    "nvme-subsys1",
    "nvme-fabrics",
    ".nvme0",
    "sda",
    "hwmon0",
]


@pytest.fixture
def sysdir(tmp_path):
    for name in NAMES:
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0n1", True),
        ("nvme12n3", True),
        ("nvme0c0n1", False),
        ("nvme0", False),
        (".nvme0n1", False),
        ("sda", False),
    ],
)
def test_namespace_filter(name, expected):
    assert namespace_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0c0n1", True),
        ("nvme0n1", False),
        ("nvme0", False),
        (".nvme0c0n1", False),
    ],
)
def test_paths_filter(name, expected):
    assert paths_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme0", True),
        ("nvme10", True),
        ("nvme0n1", False),
        ("nvme0c0n1", False),
        ("nvme-subsys0", False),
        ("nvme-fabrics", False),
        (".nvme0", False),
    ],
)
def test_ctrls_filter(name, expected):
    assert ctrls_filter(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("nvme-subsys0", True),
        ("nvme-subsys", False),
        ("nvme0", False),
        (".nvme-subsys0", False),
    ],
)
def test_subsys_filter(name, expected):
    assert subsys_filter(name) is expected


def test_filters_are_disjoint():
    for name in NAMES:
        hits = [f(name) for f in (namespace_filter, paths_filter, ctrls_filter, subsys_filter)]
        assert sum(hits) <= 1


def test_scan_subsystems(sysdir):
    assert scan_subsystems(sysdir) == ["nvme-subsys0", "nvme-subsys1"]


def test_scan_ctrls(sysdir):
    assert scan_ctrls(sysdir) == ["nvme0", "nvme1"]


def test_scan_namespaces(sysdir):
    assert scan_ctrl_namespaces(sysdir) == ["nvme0n1", "nvme0n2"]
    assert scan_subsystem_namespaces(sysdir) == ["nvme0n1", "nvme0n2"]


def test_scan_paths(sysdir):
    assert scan_ctrl_namespace_paths(sysdir) == ["nvme0c0n1"]


def test_scan_result_sorted(tmp_path):
    for name in ("nvme3", "nvme1", "nvme2"):
        (tmp_path / name).mkdir()
    result = scan_ctrls(tmp_path)
    assert result == sorted(result)
    assert len(result) == 3


def test_scan_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_ctrls(tmp_path / "absent")