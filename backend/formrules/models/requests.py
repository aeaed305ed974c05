"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class ValidateFieldRequest(BaseModel):
    """Validate a single field value."""

    field: str = Field(..., min_length=1, examples=["email"])
    value: Optional[str] = Field(default=None, examples=["someone@example.com"])
    form_values: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Every value in the submission, for cross-field rules",
    )


class ValidateFormRequest(BaseModel):
    """Validate several fields of one submission."""

    form_values: dict[str, Optional[str]]
    fields: Optional[list[str]] = Field(
        default=None,
        description="Fields to validate. Defaults to every key of form_values.",
    )
