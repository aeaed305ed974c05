"""Constraint checks — one class per RuleSet constraint, plus their fixed order.

The order in CHECK_ORDER is part of the public contract: when a value
violates several constraints, the earliest check in the list is reported.
"""

import re
from typing import Any, Mapping

from formrules.validators.base import BaseCheck
from formrules.validators.models import RuleSet

_DIGIT = re.compile(r"[0-9]")
_MULTIPLE_SPACES = re.compile(r"\s{2,}")
_UPPERCASE_FIRST = re.compile(r"[A-Z]")


def _ends_with_dollar(pattern: re.Pattern) -> bool:
    """True for a pattern whose source ends in an unescaped, single-line $."""
    source = pattern.pattern
    if pattern.flags & re.MULTILINE or not source.endswith("$"):
        return False
    backslashes = len(source[:-1]) - len(source[:-1].rstrip("\\"))
    return backslashes % 2 == 0


def _must_match(pattern: re.Pattern, value: str) -> bool:
    """Search, where a trailing $ only matches at the very end of the value."""
    if _ends_with_dollar(pattern) and value.endswith("\n"):
        pattern = re.compile(pattern.pattern[:-1] + r"\Z", pattern.flags)
    return pattern.search(value) is not None


class NoSpacesCheck(BaseCheck):
    """Rejects any space character."""

    @property
    def name(self) -> str:
        return "no_spaces"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return " " in value


class NoLeadingSpaceCheck(BaseCheck):

    @property
    def name(self) -> str:
        return "no_leading_space"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return value.startswith(" ")


class NoNumbersCheck(BaseCheck):

    @property
    def name(self) -> str:
        return "no_numbers"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return _DIGIT.search(value) is not None


class NoSpecialCharsCheck(BaseCheck):
    """Fails when the configured pattern matches anywhere in the value."""

    @property
    def name(self) -> str:
        return "no_special_chars"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return rules.no_special_chars.search(value) is not None


class NoMultipleSpacesCheck(BaseCheck):
    """Fails on any run of two or more whitespace characters."""

    @property
    def name(self) -> str:
        return "no_multiple_spaces"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return _MULTIPLE_SPACES.search(value) is not None


class CapitalizeFirstCheck(BaseCheck):

    @property
    def name(self) -> str:
        return "capitalize_first"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return _UPPERCASE_FIRST.match(value) is None


class MinLengthCheck(BaseCheck):

    @property
    def name(self) -> str:
        return "min_length"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return len(value) < rules.min_length


class MaxLengthCheck(BaseCheck):

    @property
    def name(self) -> str:
        return "max_length"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return len(value) > rules.max_length


class PatternCheck(BaseCheck):
    """Fails when the configured pattern does not match."""

    @property
    def name(self) -> str:
        return "pattern"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return not _must_match(rules.pattern, value)


class NoRepeatingDigitsCheck(BaseCheck):
    """Fails when the configured run-of-digits pattern matches."""

    @property
    def name(self) -> str:
        return "no_repeating_digits"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return rules.no_repeating_digits.search(value) is not None


class CompoundPatternCheck(BaseCheck):
    """Fails as a single unit if any named sub-pattern does not match.

    Which sub-pattern missed is deliberately not reported.
    """

    @property
    def name(self) -> str:
        return "patterns"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return any(not _must_match(p, value) for p in rules.patterns.values())


class MatchFieldCheck(BaseCheck):
    """Cross-field reference: the other field's current value must be equal."""

    @property
    def name(self) -> str:
        return "match_field"

    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        return form_values.get(rules.match_field) != value


# Evaluation order after the transform / required / empty-value steps
CHECK_ORDER: tuple[BaseCheck, ...] = (
    NoSpacesCheck(),
    NoLeadingSpaceCheck(),
    NoNumbersCheck(),
    NoSpecialCharsCheck(),
    NoMultipleSpacesCheck(),
    CapitalizeFirstCheck(),
    MinLengthCheck(),
    MaxLengthCheck(),
    PatternCheck(),
    NoRepeatingDigitsCheck(),
    CompoundPatternCheck(),
    MatchFieldCheck(),
)
