"""Field validation — declarative rule registry and deterministic evaluator.

Usage:
    from formrules.validators import ValidationEngine, RuleRegistry

    engine = ValidationEngine(RuleRegistry.with_defaults())
    error = engine.validate_field("password", value)
    if error:
        # Show the single message next to the field
"""

from formrules.validators.engine import (
    ValidationEngine,
    validation_engine,
    validate_field,
    validate_form,
    is_form_valid,
    validate_email,
    validate_password,
    validate_login_password,
    validate_full_name,
    validate_phone,
    validate_confirm_password,
)
from formrules.validators.models import CustomRule, FieldState, MessageSet, RuleSet
from formrules.validators.registry import RuleRegistry

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "RuleRegistry",
    "RuleSet",
    "MessageSet",
    "CustomRule",
    "FieldState",
    "validate_field",
    "validate_form",
    "is_form_valid",
    "validate_email",
    "validate_password",
    "validate_login_password",
    "validate_full_name",
    "validate_phone",
    "validate_confirm_password",
]
