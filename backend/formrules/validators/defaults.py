"""Default rule table — the rules and messages every new registry is seeded with.

Exact patterns are policy: callers override any of them with add_rule /
add_message after construction.
"""

from typing import Any, Optional


def _normalize_email(value: Optional[str]) -> Optional[str]:
    """Lower-case and trim, leaving missing values alone."""
    if value is None:
        return None
    return value.lower().strip()


# ──────────────────────────────────────────────────────────────────────
# RULES
# ──────────────────────────────────────────────────────────────────────

DEFAULT_RULES: dict[str, dict[str, Any]] = {
    "email": {
        "required": True,
        "pattern": r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\Z",
        "noSpaces": True,
        "transform": _normalize_email,
    },
    "password": {
        "required": True,
        "minLength": 6,
        "noSpaces": True,
        "patterns": {
            "uppercase": r"[A-Z]",
            "lowercase": r"[a-z]",
            "digit": r"\d",
            "special": r"[!@#$%^&*(),.?\":{}|<>]",
        },
    },
    # Weaker than "password" so legacy accounts can still sign in
    "loginPassword": {
        "required": True,
        "minLength": 6,
        "noSpaces": True,
    },
    "fullName": {
        "required": True,
        "pattern": r"^[a-zA-Z' ]+\Z",
        "noLeadingSpace": True,
        "noNumbers": True,
        "noSpecialChars": r"[!@#$%^&*()_+{}\[\]:;<>,.?~\\/-]",
        "noMultipleSpaces": True,
        "capitalizeFirst": True,
    },
    "phone": {
        "required": True,
        "pattern": r"^(\+91[6-9][0-9]{9}|[6789][0-9]{9})\Z",
        "noRepeatingDigits": r"(\d)\1{9}",
    },
    "confirmPassword": {
        "required": True,
        "matchField": "password",
    },
}


# ──────────────────────────────────────────────────────────────────────
# MESSAGES
# ──────────────────────────────────────────────────────────────────────

DEFAULT_MESSAGES: dict[str, dict[str, str]] = {
    "email": {
        "required": "Email is required",
        "pattern": "Enter a valid email address",
        "noSpaces": "Email cannot contain spaces",
    },
    "password": {
        "required": "Password is required",
        "minLength": "Password must be at least {minLength} characters",
        "noSpaces": "Password cannot contain spaces",
        "patterns": (
            "Password should include at least one uppercase letter, one lowercase letter, "
            "one digit, and one special character"
        ),
    },
    "loginPassword": {
        "required": "Password is required",
        "minLength": "Password must be at least {minLength} characters",
        "noSpaces": "Password cannot contain spaces",
    },
    "fullName": {
        "required": "Full Name is required",
        "pattern": "Full Name should only contain letters, and single spaces",
        "noLeadingSpace": "Full Name cannot start with a space",
        "noNumbers": "Numbers are not allowed in the name",
        "noSpecialChars": "Special characters are not allowed in the name",
        "noMultipleSpaces": "Full Name should only contain single spaces",
        "capitalizeFirst": "First letter of Full Name must be capital",
    },
    "phone": {
        "required": "Phone number is required",
        "pattern": "Enter a valid phone number",
        "noRepeatingDigits": "Phone number cannot contain repeating digits",
    },
    "confirmPassword": {
        "required": "Confirm Password is required",
        "matchField": "Passwords do not match",
    },
}


# ──────────────────────────────────────────────────────────────────────
# FALLBACK MESSAGES (constraint failed with no registered message)
# ──────────────────────────────────────────────────────────────────────

FALLBACK_MESSAGES: dict[str, str] = {
    "required": "{field} is required",
    "no_spaces": "{field} cannot contain spaces",
    "no_leading_space": "{field} cannot start with a space",
    "no_numbers": "Numbers are not allowed in {field}",
    "no_special_chars": "Special characters are not allowed in {field}",
    "no_multiple_spaces": "{field} should only contain single spaces",
    "capitalize_first": "First letter of {field} must be capital",
    "min_length": "{field} must be at least {minLength} characters",
    "max_length": "{field} must be at most {maxLength} characters",
    "pattern": "{field} format is invalid",
    "no_repeating_digits": "{field} cannot contain repeating digits",
    "patterns": "{field} does not meet complexity requirements",
    "match_field": "{field} does not match {matchField}",
    "custom": "{field} is invalid",
}

UNKNOWN_FIELD_MESSAGE = "{field} is not a recognized field"
