"""Name filters and sysfs directory scans for NVMe devices."""

from __future__ import annotations

import os
import re
from typing import Callable

NVME_CTRL_SYSFS_DIR = "/sys/class/nvme"
NVME_NS_SYSFS_DIR = "/sys/block"
NVME_SUBSYS_SYSFS_DIR = "/sys/class/nvme-subsystem"

# A scanf-style "%d": optional leading whitespace, optional sign, digits.
_INT = r"\s*[+-]?[0-9]+"

_NAMESPACE_RE = re.compile(rf"nvme{_INT}n{_INT}", re.ASCII)
_PATH_RE = re.compile(rf"nvme{_INT}c{_INT}n{_INT}", re.ASCII)
_CTRL_RE = re.compile(rf"nvme{_INT}", re.ASCII)
_SUBSYS_RE = re.compile(rf"nvme-subsys{_INT}", re.ASCII)


def _visible(name: str) -> bool:
    return not name.startswith(".")


def namespace_filter(name: str) -> bool:
    """Return True if *name* looks like a namespace (nvmeXnY)."""
    return _visible(name) and _NAMESPACE_RE.match(name) is not None


def paths_filter(name: str) -> bool:
    """Return True if *name* looks like a namespace path (nvmeXcYnZ)."""
    return _visible(name) and _PATH_RE.match(name) is not None


def ctrls_filter(name: str) -> bool:
    """Return True if *name* looks like a controller (nvmeX)."""
    if not _visible(name):
        return False
    if _PATH_RE.match(name) or _NAMESPACE_RE.match(name):
        return False
    return _CTRL_RE.match(name) is not None


def subsys_filter(name: str) -> bool:
    """Return True if *name* looks like a subsystem (nvme-subsysX)."""
    return _visible(name) and _SUBSYS_RE.match(name) is not None


def _scan(directory: str | os.PathLike[str], accept: Callable[[str], bool]) -> list[str]:
    return sorted(name for name in os.listdir(directory) if accept(name))


def scan_subsystems(sysfs_dir: str | os.PathLike[str] = NVME_SUBSYS_SYSFS_DIR) -> list[str]:
    """List subsystem entries in *sysfs_dir*, sorted by name."""
    return _scan(sysfs_dir, subsys_filter)


def scan_subsystem_namespaces(subsys_dir: str | os.PathLike[str]) -> list[str]:
    """List namespace entries of a subsystem directory, sorted by name."""
    return _scan(subsys_dir, namespace_filter)


def scan_ctrls(sysfs_dir: str | os.PathLike[str] = NVME_CTRL_SYSFS_DIR) -> list[str]:
    """List controller entries in *sysfs_dir*, sorted by name."""
    return _scan(sysfs_dir, ctrls_filter)


def scan_ctrl_namespace_paths(ctrl_dir: str | os.PathLike[str]) -> list[str]:
    """List namespace path entries of a controller directory, sorted by name."""
    return _scan(ctrl_dir, paths_filter)


def scan_ctrl_namespaces(ctrl_dir: str | os.PathLike[str]) -> list[str]:
    """List namespace entries of a controller directory, sorted by name."""
    return _scan(ctrl_dir, namespace_filter)