"""Pydantic schemas for API contracts."""
from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
