"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass

MISSING_PAYLOAD_MESSAGE = "No payload included in query string parameters!"


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_missing_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_MISSING_PAYLOAD", message=message or MISSING_PAYLOAD_MESSAGE, status_code=400)
