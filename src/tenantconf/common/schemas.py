"""Shared Pydantic schemas for tenantconf."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    service: str = "tenantconf"


class ErrorResponse(BaseModel):
    error: str
    code: str
    detail: str = ""
