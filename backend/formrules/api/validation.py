"""Validation API — per-field and whole-form checks for UI clients."""

from fastapi import APIRouter, Depends, Request

import structlog

from formrules.models.requests import ValidateFieldRequest, ValidateFormRequest
from formrules.models.responses import (
    FieldRulesResponse,
    ValidateFieldResponse,
    ValidateFormResponse,
)
from formrules.validators import ValidationEngine

logger = structlog.get_logger()

router = APIRouter()


def get_engine(request: Request) -> ValidationEngine:
    """Engine built at startup (see main.lifespan)."""
    return request.app.state.engine


@router.get("/fields", response_model=list[FieldRulesResponse])
async def list_fields(engine: ValidationEngine = Depends(get_engine)):
    """Registered field names and the constraints each carries."""
    return [
        FieldRulesResponse(field=name, constraints=engine.registry.get_rule(name).constraint_names())
        for name in engine.registry.fields()
    ]


@router.post("/validate/field", response_model=ValidateFieldResponse)
async def validate_field(body: ValidateFieldRequest, engine: ValidationEngine = Depends(get_engine)):
    """Validate one value, e.g. on blur."""
    error = engine.validate_field(body.field, body.value, body.form_values)
    state = engine.get_field_state(body.field, body.value, body.form_values)

    return ValidateFieldResponse(
        field=body.field,
        error=error,
        state=state.value,
        valid=not error,
    )


@router.post("/validate/form", response_model=ValidateFormResponse)
async def validate_form(body: ValidateFormRequest, engine: ValidationEngine = Depends(get_engine)):
    """Validate a whole submission, e.g. on submit."""
    errors = engine.validate_form(body.form_values, body.fields)

    if errors:
        logger.info("form_rejected", fields=sorted(errors))

    return ValidateFormResponse(valid=not errors, errors=errors)
