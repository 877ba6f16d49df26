"""Host identity: system UUID discovery and the host NQN and host ID files."""

from __future__ import annotations

import errno
import os
import re
import uuid
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

UUID_SIZE = 37
"""Length of a textual UUID including its terminator."""

NQN_SIZE = 223
HOSTID_SIZE = 37

HOSTNQN_FILE = "/etc/nvme/hostnqn"
HOSTID_FILE = "/etc/nvme/hostid"

PATH_UUID_IBM = "/proc/device-tree/ibm,partition-uuid"
PATH_DMI_ENTRIES = "/sys/firmware/dmi/entries"
PATH_DMI_PROD_UUID = "/sys/class/dmi/id/product_uuid"

HOSTNQN_PREFIX = "nqn.2014-08.org.nvmexpress:uuid:"

_DMI_READ_SIZE = 512
_DMI_UUID_OFFSET = 8
_SYSTEM_INFO_TYPE = 1
_SCANF_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _no_uuid(source: PathLike) -> OSError:
    return OSError(errno.ENXIO, "no system UUID found", os.fspath(source))


def _read_prefix(path: PathLike, size: int) -> bytes:
    with open(path, "rb") as handle:
        return handle.read(size)


def _cstr(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def uuid_from_dmi_raw(raw: bytes) -> str:
    """Format the system UUID held in a raw SMBIOS type 1 structure.

    The first three UUID fields are stored little-endian (SMBIOS 3.0,
    section 7.2.1). Raises ValueError if *raw* is too short.
    """
    end = _DMI_UUID_OFFSET + 16
    if len(raw) < end:
        raise ValueError("SMBIOS system information structure too short")
    b = raw[_DMI_UUID_OFFSET:end]
    return (
        f"{b[3]:02x}{b[2]:02x}{b[1]:02x}{b[0]:02x}-"
        f"{b[5]:02x}{b[4]:02x}-"
        f"{b[7]:02x}{b[6]:02x}-"
        f"{b[8]:02x}{b[9]:02x}-"
        + b[10:16].hex()
    )


def uuid_from_product_uuid(path: PathLike = PATH_DMI_PROD_UUID) -> str:
    """Read the system UUID from the kernel's DMI product_uuid file.

    Raises OSError if the file is missing or its first line is not a UUID
    of the expected length.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        line = handle.readline()
    if len(line) != UUID_SIZE:
        raise _no_uuid(path)
    return line[: UUID_SIZE - 1]


def _dmi_entry_type(entry: Path) -> Optional[int]:
    try:
        text = _read_prefix(entry / "type", _DMI_READ_SIZE).decode("ascii", errors="replace")
    except OSError:
        return None
    match = _SCANF_INT.match(text)
    return int(match.group(1)) if match else None


def uuid_from_dmi_entries(path: PathLike = PATH_DMI_ENTRIES) -> str:
    """Read the system UUID from the first SMBIOS type 1 entry under *path*.

    Raises OSError if the directory is missing or holds no usable entry.
    """
    root = Path(path)
    try:
        names = sorted(os.listdir(root))
    except OSError as exc:
        raise _no_uuid(path) from exc
    for name in names:
        if name.startswith("."):
            continue
        entry = root / name
        if _dmi_entry_type(entry) != _SYSTEM_INFO_TYPE:
            continue
        try:
            raw = _read_prefix(entry / "raw", _DMI_READ_SIZE)
        except OSError:
            continue
        try:
            return uuid_from_dmi_raw(raw)
        except ValueError:
            continue
    raise _no_uuid(path)


def uuid_from_device_tree(path: PathLike = PATH_UUID_IBM) -> str:
    """Read the partition UUID exported through the device tree.

    Raises OSError if the file is missing or empty.
    """
    try:
        data = _read_prefix(path, UUID_SIZE - 1)
    except OSError as exc:
        raise _no_uuid(path) from exc
    text = _cstr(data)
    if not text:
        raise _no_uuid(path)
    return text


def _system_uuid(
    product_uuid_path: PathLike, dmi_entries_path: PathLike, device_tree_path: PathLike
) -> str:
    try:
        return uuid_from_product_uuid(product_uuid_path)
    except OSError:
        pass
    try:
        return uuid_from_dmi_entries(dmi_entries_path)
    except OSError:
        pass
    try:
        return uuid_from_device_tree(device_tree_path)
    except OSError:
        pass
    return str(uuid.uuid4())


def hostnqn_generate(
    product_uuid_path: PathLike = PATH_DMI_PROD_UUID,
    dmi_entries_path: PathLike = PATH_DMI_ENTRIES,
    device_tree_path: PathLike = PATH_UUID_IBM,
) -> str:
    """Generate a host NQN from the machine's UUID, or a random one."""
    system_uuid = _system_uuid(product_uuid_path, dmi_entries_path, device_tree_path)
    return f"{HOSTNQN_PREFIX}{system_uuid}"


def read_id_file(path: PathLike, size: int) -> Optional[str]:
    """Return the first line of at most ``size - 1`` bytes of *path*.

    Returns None if the file cannot be read or is empty.
    """
    try:
        data = _read_prefix(path, max(size - 1, 0))
    except OSError:
        return None
    text = _cstr(data)
    if not text:
        return None
    return text.split("\n", 1)[0]


def hostnqn_from_file(path: PathLike = HOSTNQN_FILE) -> Optional[str]:
    """Read the host NQN from its configuration file."""
    return read_id_file(path, NQN_SIZE)


def hostid_from_file(path: PathLike = HOSTID_FILE) -> Optional[str]:
    """Read the host identifier from its configuration file."""
    return read_id_file(path, HOSTID_SIZE)