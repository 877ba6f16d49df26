# nvmefabrics

Helpers for working with NVMe over Fabrics (NVMe-oF) and NVMe-MI on Linux,
written in plain Python with no third-party dependencies.

## Modules

- `nvmefabrics.strings`: turn the numeric fields of discovery log page entries
  into readable names. `trtype_str`, `adrfam_str`, `subtype_str`, `treq_str`,
  `eflags_str`, `sectype_str`, `prtype_str`, `qptype_str` and `cms_str` each
  return a name, or `"unrecognized"` for a value they do not know. The
  `TransportType`, `AddressFamily` and `SubsystemType` enums hold the values.
- `nvmefabrics.filters`: recognise sysfs entry names (`namespace_filter`,
  `paths_filter`, `ctrls_filter`, `subsys_filter`) and list a directory's
  matching entries in sorted order (`scan_subsystems`,
  `scan_subsystem_namespaces`, `scan_ctrls`, `scan_ctrl_namespace_paths`,
  `scan_ctrl_namespaces`).
- `nvmefabrics.hostid`: find the system UUID from DMI product_uuid, SMBIOS
  entries or the device tree (`uuid_from_product_uuid`,
  `uuid_from_dmi_entries`, `uuid_from_dmi_raw`, `uuid_from_device_tree`),
  build a host NQN from it, falling back to a random UUID
  (`hostnqn_generate`), and read the configured host NQN and host ID
  (`hostnqn_from_file`, `hostid_from_file`, `read_id_file`). All paths can be
  passed in, so other roots can be used.
- `nvmefabrics.mi_util`: NVMe-MI formatting helpers: `hexdump`,
  `sec_proto_description`, `SmbusFreq` with `smbus_freq_str` and
  `smbus_freq_value`, `decode_pci_routing` and `port_type_name`.
- `nvmefabrics.textutil`: `strcount`, `strstarts` and `strends`.

## Examples

```python
from nvmefabrics.strings import trtype_str, adrfam_str

print(trtype_str(3))   # "tcp"
print(adrfam_str(1))   # "ipv4"
```

```python
from nvmefabrics.hostid import hostnqn_generate

print(hostnqn_generate())
# nqn.2014-08.org.nvmexpress:uuid:<system or random uuid>
```

```python
from nvmefabrics.filters import scan_ctrls

for name in scan_ctrls("/sys/class/nvme"):
    print(name)
```

```python
from nvmefabrics.mi_util import hexdump, decode_pci_routing

print(hexdump(b"hello, world"), end="")
print(decode_pci_routing(0x0108))   # PciRouting(bus=1, dev=1, fn=0)
```

## What it does not do

The package does not connect to controllers, fetch discovery log pages, hold
fabrics connection options or talk to NVMe-MI endpoints. It has no
command-line tools. It decodes, formats, scans sysfs names and reads host
identity files only.

## Running the tests

```
pip install -e .[test]
pytest
```