"""Checksum request handling."""
from __future__ import annotations

import logging

from ..crc import calculate_crc
from ..monitoring import record_checksum
from .errors import err_missing_payload

logger = logging.getLogger("crc_ccitt.checksum")


def checksum_payload(payload: str | None) -> str:
    """Return the CRC-CCITT of a request payload using engine defaults."""

    if not payload:
        raise err_missing_payload()

    crc = calculate_crc(payload)
    record_checksum(len(payload))
    logger.debug("checksum computed", extra={"payload_length": len(payload), "crc": crc})
    return crc
