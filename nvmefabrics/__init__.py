"""NVMe over Fabrics helpers: discovery field names, sysfs scanning, host identifiers and NVMe-MI formatting."""

__version__ = "0.1.0"

__all__ = [
    "filters",
    "hostid",
    "mi_util",
    "strings",
    "textutil",
]