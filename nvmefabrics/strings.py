"""Decoders for the fields of NVMe-oF discovery log page entries."""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping

UNRECOGNIZED = "unrecognized"


class TransportType(IntEnum):
    """Transport type (TRTYPE) of a discovery log entry."""

    RDMA = 1
    FC = 2
    TCP = 3
    LOOP = 254


class AddressFamily(IntEnum):
    """Address family (ADRFAM) of a discovery log entry."""

    PCI = 0
    IP4 = 1
    IP6 = 2
    IB = 3
    FC = 4


class SubsystemType(IntEnum):
    """Subsystem type (SUBTYPE) of a discovery log entry."""

    DISC = 1
    NVME = 2
    CURR = 3


class _Treq(IntEnum):
    NOT_SPECIFIED = 0
    REQUIRED = 1
    NOT_REQUIRED = 2
    DISABLE_SQFLOW = 4


class _EFlags(IntEnum):
    NONE = 0
    DUPRETINFO = 1 << 0
    EPCSD = 1 << 1
    NCC = 1 << 2


_TRTYPES: Mapping[int, str] = {
    TransportType.RDMA: "rdma",
    TransportType.FC: "fc",
    TransportType.TCP: "tcp",
    TransportType.LOOP: "loop",
}

_ADRFAMS: Mapping[int, str] = {
    AddressFamily.PCI: "pci",
    AddressFamily.IP4: "ipv4",
    AddressFamily.IP6: "ipv6",
    AddressFamily.IB: "infiniband",
    AddressFamily.FC: "fibre-channel",
}

_SUBTYPES: Mapping[int, str] = {
    SubsystemType.DISC: "discovery subsystem referral",
    SubsystemType.NVME: "nvme subsystem",
    SubsystemType.CURR: "current discovery subsystem",
}

_TREQS: Mapping[int, str] = {
    _Treq.NOT_SPECIFIED: "not specified",
    _Treq.REQUIRED: "required",
    _Treq.NOT_REQUIRED: "not required",
    _Treq.DISABLE_SQFLOW: "not specified, sq flow control disable supported",
}

_EPCSD = "explicit discovery connections"
_DUPRETINFO = "duplicate discovery information"
_NCC = "no cdc connectivity"

_EFLAGS: Mapping[int, str] = {
    _EFlags.NONE: "not specified",
    _EFlags.EPCSD: _EPCSD,
    _EFlags.DUPRETINFO: _DUPRETINFO,
    _EFlags.EPCSD | _EFlags.DUPRETINFO: f"{_EPCSD}, {_DUPRETINFO}",
    _EFlags.NCC: _NCC,
    _EFlags.EPCSD | _EFlags.NCC: f"{_EPCSD}, {_NCC}",
    _EFlags.DUPRETINFO | _EFlags.NCC: f"{_DUPRETINFO}, {_NCC}",
    _EFlags.EPCSD | _EFlags.DUPRETINFO | _EFlags.NCC: f"{_EPCSD}, {_DUPRETINFO}, {_NCC}",
}

_SECTYPES: Mapping[int, str] = {
    0: "none",
    1: "tls",
    2: "tls13",
}

_PRTYPES: Mapping[int, str] = {
    1: "not specified",
    2: "infiniband",
    3: "roce",
    4: "roce-v2",
    5: "iwarp",
}

_QPTYPES: Mapping[int, str] = {
    1: "connected",
    2: "datagram",
}

_CMS: Mapping[int, str] = {
    1: "rdma-cm",
}


def _lookup(table: Mapping[int, str], value: int) -> str:
    return table.get(int(value), UNRECOGNIZED)


def trtype_str(trtype: int) -> str:
    """Decode the transport type field."""
    return _lookup(_TRTYPES, trtype)


def adrfam_str(adrfam: int) -> str:
    """Decode the address family field."""
    return _lookup(_ADRFAMS, adrfam)


def subtype_str(subtype: int) -> str:
    """Decode the subsystem type field."""
    return _lookup(_SUBTYPES, subtype)


def treq_str(treq: int) -> str:
    """Decode the transport requirements field."""
    return _lookup(_TREQS, treq)


def eflags_str(eflags: int) -> str:
    """Decode the entry flags field."""
    return _lookup(_EFLAGS, eflags)


def sectype_str(sectype: int) -> str:
    """Decode the TCP security type field."""
    return _lookup(_SECTYPES, sectype)


def prtype_str(prtype: int) -> str:
    """Decode the RDMA provider type field."""
    return _lookup(_PRTYPES, prtype)


def qptype_str(qptype: int) -> str:
    """Decode the RDMA QP service type field."""
    return _lookup(_QPTYPES, qptype)


def cms_str(cms: int) -> str:
    """Decode the RDMA connection management service field."""
    return _lookup(_CMS, cms)