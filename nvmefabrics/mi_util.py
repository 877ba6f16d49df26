"""Formatting and decoding helpers for NVMe-MI endpoint queries."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Optional

_HEXDUMP_ROW = 16
_HEX_WIDTH = _HEXDUMP_ROW * len("00 ")


class SmbusFreq(IntEnum):
    """SMBus/I2C access frequency of an NVMe-MI port."""

    FREQ_100KHZ = 0x1
    FREQ_400KHZ = 0x2
    FREQ_1MHZ = 0x3


_SMBUS_FREQ_NAMES: dict[SmbusFreq, str] = {
    SmbusFreq.FREQ_100KHZ: "100k",
    SmbusFreq.FREQ_400KHZ: "400k",
    SmbusFreq.FREQ_1MHZ: "1M",
}

_SEC_PROTOS: dict[int, str] = {
    0x00: "Security protocol information",
    0xEA: "NVMe",
    0xEC: "JEDEC Universal Flash Storage",
    0xED: "SDCard TrustedFlash Security",
    0xEE: "IEEE 1667",
    0xEF: "ATA Device Server Password Security",
}

_PORT_TYPES: dict[int, str] = {
    0x00: "inactive",
    0x01: "PCIe",
    0x02: "SMBus",
}


class PciRouting(NamedTuple):
    """PCIe bus, device and function of a controller."""

    bus: int
    dev: int
    fn: int


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hexdump(data: bytes) -> str:
    """Render *data* as offset, hex bytes and printable characters, 16 per row."""
    lines = []
    for offset in range(0, len(data), _HEXDUMP_ROW):
        row = data[offset : offset + _HEXDUMP_ROW]
        hex_part = "".join(f"{byte:02x} " for byte in row)
        chars = "".join(_printable(byte) for byte in row)
        lines.append(f"{offset:08x}  {hex_part:<{_HEX_WIDTH}} |{chars}|\n")
    return "".join(lines)


def sec_proto_description(proto_id: int) -> str:
    """Describe a security protocol identifier."""
    name = _SEC_PROTOS.get(proto_id)
    if name is not None:
        return name
    if proto_id >= 0xF0:
        return "Vendor specific"
    return "unknown"


def smbus_freq_str(freq: int) -> Optional[str]:
    """Return the short name of an SMBus frequency, or None if unknown."""
    try:
        return _SMBUS_FREQ_NAMES[SmbusFreq(freq)]
    except ValueError:
        return None


def smbus_freq_value(name: str) -> SmbusFreq:
    """Return the SMBus frequency for a short name such as ``400k``.

    Raises ValueError for an unknown name.
    """
    for freq, freq_name in _SMBUS_FREQ_NAMES.items():
        if freq_name == name:
            return freq
    raise ValueError(f"unknown SMBus freq {name}. Try 100k, 400k or 1M")


def decode_pci_routing(bdfn: int) -> PciRouting:
    """Split a 16-bit PCIe routing identifier into bus, device and function."""
    bdfn &= 0xFFFF
    return PciRouting(bdfn >> 8, (bdfn >> 3) & 0x1F, bdfn & 0x7)


def port_type_name(portt: int) -> str:
    """Name an NVMe-MI port type, or ``INVALID`` for an unknown one."""
    return _PORT_TYPES.get(portt, "INVALID")