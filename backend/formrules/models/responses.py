"""API response models."""

from pydantic import BaseModel
from typing import Literal


class ValidateFieldResponse(BaseModel):
    """Result of validating a single field."""

    field: str
    error: str = ""
    state: Literal["neutral", "valid", "invalid"]
    valid: bool


class ValidateFormResponse(BaseModel):
    """Result of validating a submission; only failing fields are listed."""

    valid: bool
    errors: dict[str, str] = {}


class FieldRulesResponse(BaseModel):
    """A registered field and the constraints it carries."""

    field: str
    constraints: list[str] = []


class HealthResponse(BaseModel):
    """Service health."""

    status: Literal["healthy", "unhealthy"]
    uptime_seconds: float
    registered_fields: int
    strict_fields: bool
