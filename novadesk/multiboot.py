"""Reading the memory and boot-device fields of a multiboot information block."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_FIELDS = struct.Struct("<4I")


@dataclass(frozen=True)
class MultibootInfo:
    """Lower and upper memory in KiB, and the BIOS boot device."""

    mem_lower: int
    mem_upper: int
    boot_device: int


def parse_multiboot_info(data: bytes) -> MultibootInfo:
    """Parse the little-endian header words 1 to 3 of a multiboot info block."""
    if len(data) < _FIELDS.size:
        raise ValueError(
            f"multiboot info needs at least {_FIELDS.size} bytes, got {len(data)}"
        )
    _, mem_lower, mem_upper, boot_device = _FIELDS.unpack_from(data)
    info = MultibootInfo(mem_lower, mem_upper, boot_device)
    print(
        f"[Multiboot] mem_lower={info.mem_lower}KB, mem_upper={info.mem_upper}KB, "
        f"boot_device=0x{info.boot_device:08X}"
    )
    return info