"""CRC-CCITT (ISO/IEC 13239) checksum engine."""
from __future__ import annotations

import struct

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def calculate_crc(payload: str, polynomial: int = CRC16_POLY, initial_value: int = CRC16_INIT) -> str:
    """Compute the uppercase CRC-CCITT checksum of ``payload``.

    The payload is consumed as UTF-16 code units, MSB first, so characters
    outside the BMP contribute both halves of their surrogate pair. The
    register is truncated to 16 bits after each unit; only its low 16 bits
    feed back into later steps. The result is always four hex digits,
    padded left with ``0``.
    """

    checksum = initial_value
    data = payload.encode("utf-16-be", "surrogatepass")
    for (unit,) in struct.iter_unpack(">H", data):
        checksum ^= unit << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ polynomial
            else:
                checksum <<= 1
        checksum &= 0xFFFF
    return f"{checksum & 0xFFFF:04X}"
