"""Validation Engine — runs the fixed check pipeline over a registry's rules.

This is the main entry point for field validation. A failing value yields
exactly one message (the earliest failing constraint); a passing value
yields "".

Usage:
    engine = ValidationEngine()
    error = engine.validate_field("email", "someone@example.com")
    errors = engine.validate_form(form_values, ["email", "password"])
"""

import time
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

import structlog

from formrules.validators.checks import CHECK_ORDER
from formrules.validators.defaults import FALLBACK_MESSAGES, UNKNOWN_FIELD_MESSAGE
from formrules.validators.models import CustomRule, FieldState, MessageSet, RuleSet, render_message
from formrules.validators.registry import RuleRegistry

logger = structlog.get_logger()

FormValues = Mapping[str, Any]
CustomRuleInput = Union[CustomRule, Mapping[str, Any]]

# UI classes per field state
FIELD_STATE_CLASSES: dict[FieldState, str] = {
    FieldState.VALID: "border-green-500 focus:ring-green-500",
    FieldState.INVALID: "border-red-500 focus:ring-red-500",
    FieldState.NEUTRAL: "border-gray-300 focus:ring-blue-500",
}


def _is_blank(value: Any) -> bool:
    return not value or value.strip() == ""


class ValidationEngine:
    """Evaluates field values against a RuleRegistry.

    Design principles:
        - Deterministic: same (field, value, form values, registry) → same result
        - Single error: the pipeline stops at the first failing constraint
        - Pure: values are never mutated, nothing is read besides the arguments
        - Injectable: pass a registry, or get a fresh one seeded with defaults
    """

    def __init__(self, registry: Optional[RuleRegistry] = None, strict: bool = False):
        """Initialize with a registry or a fresh default-seeded one.

        Args:
            registry: Rule registry to read from. If None, uses the default table.
            strict: Report unregistered field names instead of passing them.
        """
        self.registry = registry if registry is not None else RuleRegistry.with_defaults()
        self.strict = strict

    # ── Single field ──

    def validate_field(self, field_name: str, value: Any, form_values: Optional[FormValues] = None) -> str:
        """Validate one value and return its error message ("" = valid).

        Args:
            field_name: Registered field name
            value: Raw value as entered by the user
            form_values: Every value in the submission, for cross-field rules

        Returns:
            The first failing constraint's rendered message, or ""
        """
        form_values = form_values or {}

        if self.strict and not self.registry.has_field(field_name):
            logger.debug("unknown_field", field=field_name)
            return UNKNOWN_FIELD_MESSAGE.replace("{field}", field_name)

        rules = self.registry.get_rule(field_name)
        messages = self.registry.get_messages(field_name)

        if rules.transform is not None:
            value = rules.transform(value)

        if _is_blank(value):
            if rules.required:
                return self._message(field_name, "required", rules, messages)
            return ""

        for check in CHECK_ORDER:
            if check.applies(rules) and check.fails(value, rules, form_values):
                return self._message(field_name, check.name, rules, messages)

        return ""

    def get_field_validator(self, field_name: str) -> Callable[..., str]:
        """Bind validate_field to one field name."""

        def validate(value: Any, form_values: Optional[FormValues] = None) -> str:
            return self.validate_field(field_name, value, form_values)

        return validate

    def get_field_state(self, field_name: str, value: Any, form_values: Optional[FormValues] = None) -> FieldState:
        """Classify a value for display.

        Empty values are always NEUTRAL, required or not, so untouched fields
        are not flagged.
        """
        if _is_blank(value):
            return FieldState.NEUTRAL
        if self.validate_field(field_name, value, form_values):
            return FieldState.INVALID
        return FieldState.VALID

    def get_field_classes(
        self,
        field_name: str,
        value: Any,
        form_values: Optional[FormValues] = None,
        base_classes: str = "",
    ) -> str:
        """CSS classes for the field's current state, appended to base_classes."""
        state = self.get_field_state(field_name, value, form_values)
        return f"{base_classes} {FIELD_STATE_CLASSES[state]}".strip()

    # ── Whole form ──

    def validate_form(self, form_values: FormValues, field_names: Optional[Iterable[str]] = None) -> dict[str, str]:
        """Validate several fields; only fields with an error are included.

        Args:
            form_values: Every value in the submission
            field_names: Fields to check. If None, every key of form_values.

        Returns:
            Mapping of field name → error message (never empty strings)
        """
        start_time = time.perf_counter()
        names = list(field_names) if field_names is not None else list(form_values)

        errors: dict[str, str] = {}
        for field_name in names:
            error = self.validate_field(field_name, form_values.get(field_name), form_values)
            if error:
                errors[field_name] = error

        logger.debug(
            "form_validated",
            fields=len(names),
            errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return errors

    def is_form_valid(self, form_values: FormValues, field_names: Optional[Iterable[str]] = None) -> bool:
        """True when validate_form reports no errors."""
        return not self.validate_form(form_values, field_names)

    # ── Custom rules ──

    def create_custom_rule(self, field_name: str, validator: Callable[[Any, dict], bool], message: str) -> None:
        """Register a custom predicate and its message on the field."""
        self.registry.add_rule(field_name, {"custom": validator})
        self.registry.add_message(field_name, {"custom": message})
        logger.debug("custom_rule_registered", field=field_name)

    def validate_with_custom_rules(
        self,
        field_name: str,
        value: Any,
        custom_rules: Optional[Sequence[CustomRuleInput]] = None,
        form_values: Optional[FormValues] = None,
    ) -> str:
        """Run the standard pipeline, then custom rules in order.

        Custom rules are only evaluated when the standard pipeline passes.
        If custom_rules is None, the rule registered through
        create_custom_rule (if any) is used.

        Returns:
            The standard error, the first failing custom rule's message, or ""
        """
        form_values = form_values or {}

        error = self.validate_field(field_name, value, form_values)
        if error:
            return error

        if custom_rules is None:
            custom_rules = self._registered_custom_rules(field_name)

        for rule in custom_rules:
            if isinstance(rule, CustomRule):
                validator, message = rule.validator, rule.message
            else:
                validator, message = rule.get("validator"), rule.get("message")
            if not callable(validator):
                continue
            if not validator(value, form_values):
                return message or FALLBACK_MESSAGES["custom"].replace("{field}", field_name)

        return ""

    # ── Helpers ──

    def _registered_custom_rules(self, field_name: str) -> list[CustomRule]:
        rules = self.registry.get_rule(field_name)
        if rules.custom is None:
            return []
        messages = self.registry.get_messages(field_name)
        return [CustomRule(validator=rules.custom, message=messages.custom)]

    @staticmethod
    def _message(field_name: str, constraint: str, rules: RuleSet, messages: MessageSet) -> str:
        """Render the registered (or fallback) message for a failed constraint."""
        template = getattr(messages, constraint)
        if template is None:
            template = FALLBACK_MESSAGES[constraint].replace("{field}", field_name)
            if rules.match_field is not None:
                template = template.replace("{matchField}", rules.match_field)
        return render_message(template, rules)


# Module-level default engine
validation_engine = ValidationEngine()


def validate_field(field_name: str, value: Any, form_values: Optional[FormValues] = None) -> str:
    return validation_engine.validate_field(field_name, value, form_values)


def validate_form(form_values: FormValues, field_names: Optional[Iterable[str]] = None) -> dict[str, str]:
    return validation_engine.validate_form(form_values, field_names)


def is_form_valid(form_values: FormValues, field_names: Optional[Iterable[str]] = None) -> bool:
    return validation_engine.is_form_valid(form_values, field_names)


# Field-specific shortcuts
def validate_email(value: Any) -> str:
    return validation_engine.validate_field("email", value)


def validate_password(value: Any) -> str:
    return validation_engine.validate_field("password", value)


def validate_login_password(value: Any) -> str:
    return validation_engine.validate_field("loginPassword", value)


def validate_full_name(value: Any) -> str:
    return validation_engine.validate_field("fullName", value)


def validate_phone(value: Any) -> str:
    return validation_engine.validate_field("phone", value)


def validate_confirm_password(value: Any, form_values: Optional[FormValues] = None) -> str:
    return validation_engine.validate_field("confirmPassword", value, form_values)
