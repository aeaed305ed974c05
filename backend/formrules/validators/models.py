"""Validation models — rule sets, message sets, custom rules, and field states.

Rule and message sets are frozen records: every constraint is optional and
registration input is checked here, so a malformed rule fails when it is
added rather than when a value is validated.
"""

import re
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

# Shared config: camelCase aliases ("minLength") with snake_case names also accepted
_CONSTRAINT_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
    "extra": "forbid",
}


class FieldState(str, Enum):
    """Three-way UI classification of a field value."""

    NEUTRAL = "neutral"  # Empty value, nothing to flag yet
    VALID = "valid"
    INVALID = "invalid"


class RuleSet(BaseModel):
    """All constraints registered for one field."""

    required: Optional[bool] = None

    # Structural string constraints
    no_spaces: Optional[bool] = None
    no_leading_space: Optional[bool] = None
    no_numbers: Optional[bool] = None
    no_multiple_spaces: Optional[bool] = None
    capitalize_first: Optional[bool] = None
    no_special_chars: Optional[re.Pattern] = None  # Fails if it matches

    min_length: Optional[int] = None
    max_length: Optional[int] = None

    pattern: Optional[re.Pattern] = None             # Fails if it does NOT match
    no_repeating_digits: Optional[re.Pattern] = None  # Fails if it matches
    patterns: Optional[dict[str, re.Pattern]] = None  # Fails if any sub-pattern misses

    match_field: Optional[str] = None
    transform: Optional[Callable[[Any], Any]] = None
    custom: Optional[Callable[[Any, dict], bool]] = None

    model_config = {**_CONSTRAINT_CONFIG, "arbitrary_types_allowed": True}

    @field_validator("min_length", "max_length")
    @classmethod
    def _non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("length constraints must be non-negative")
        return value

    def constraint_names(self) -> list[str]:
        """Camel-cased names of the constraints that are set."""
        return [
            to_camel(name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        ]


class MessageSet(BaseModel):
    """Message templates keyed by the same constraint names as RuleSet."""

    required: Optional[str] = None
    no_spaces: Optional[str] = None
    no_leading_space: Optional[str] = None
    no_numbers: Optional[str] = None
    no_multiple_spaces: Optional[str] = None
    capitalize_first: Optional[str] = None
    no_special_chars: Optional[str] = None
    min_length: Optional[str] = None
    max_length: Optional[str] = None
    pattern: Optional[str] = None
    no_repeating_digits: Optional[str] = None
    patterns: Optional[str] = None
    match_field: Optional[str] = None
    custom: Optional[str] = None

    model_config = _CONSTRAINT_CONFIG


class CustomRule(BaseModel):
    """An ad-hoc predicate evaluated after the standard checks pass."""

    validator: Optional[Callable[[Any, dict], bool]] = None
    message: Optional[str] = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


def render_message(template: str, rules: RuleSet) -> str:
    """Substitute {minLength}/{maxLength} placeholders from the rule set."""
    if rules.min_length is not None:
        template = template.replace("{minLength}", str(rules.min_length))
    if rules.max_length is not None:
        template = template.replace("{maxLength}", str(rules.max_length))
    return template
