"""Tests for the validation pipeline: ordering, short-circuits, messages."""

import pytest

from formrules.validators import FieldState, RuleRegistry, ValidationEngine


class TestDefaultFields:
    def test_full_name_must_be_capitalized(self, engine):
        assert engine.validate_field("fullName", "john", {}) == "First letter of Full Name must be capital"

    def test_full_name_valid(self, engine):
        assert engine.validate_field("fullName", "John Doe", {}) == ""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (" John", "Full Name cannot start with a space"),
            ("John2", "Numbers are not allowed in the name"),
            ("John!", "Special characters are not allowed in the name"),
            ("John  Doe", "Full Name should only contain single spaces"),
            ("John_Doe", "Special characters are not allowed in the name"),
            ("Jöhn", "Full Name should only contain letters, and single spaces"),
        ],
    )
    def test_full_name_failures(self, engine, value, expected):
        assert engine.validate_field("fullName", value) == expected

    def test_password_missing_complexity(self, engine):
        assert engine.validate_field("password", "abcdef", {}) == (
            "Password should include at least one uppercase letter, one lowercase letter, "
            "one digit, and one special character"
        )

    def test_password_valid(self, engine):
        assert engine.validate_field("password", "Abcdef1!", {}) == ""

    def test_password_too_short_renders_min_length(self, engine):
        assert engine.validate_field("password", "Ab1!") == "Password must be at least 6 characters"

    def test_password_with_space(self, engine):
        assert engine.validate_field("password", "Abc def1!") == "Password cannot contain spaces"

    def test_login_password_is_weaker(self, engine):
        assert engine.validate_field("loginPassword", "abcdef") == ""

    def test_email_is_normalized_before_checking(self, engine):
        assert engine.validate_field("email", "  Someone@Example.COM ") == ""

    def test_email_inner_space(self, engine):
        assert engine.validate_field("email", "some one@example.com") == "Email cannot contain spaces"

    def test_email_bad_format(self, engine):
        assert engine.validate_field("email", "bad") == "Enter a valid email address"

    @pytest.mark.parametrize("value", ["9876543210", "+919876543210", "6123456789"])
    def test_phone_valid(self, engine, value):
        assert engine.validate_field("phone", value) == ""

    def test_phone_bad_format(self, engine):
        assert engine.validate_field("phone", "12345") == "Enter a valid phone number"

    def test_phone_repeating_digits(self, engine):
        assert engine.validate_field("phone", "9999999999") == "Phone number cannot contain repeating digits"

    def test_confirm_password_matches(self, engine):
        assert engine.validate_field("confirmPassword", "abc", {"password": "abc"}) == ""

    def test_confirm_password_mismatch(self, engine):
        assert engine.validate_field("confirmPassword", "abc", {"password": "xyz"}) == "Passwords do not match"

    def test_confirm_password_without_password_in_form(self, engine):
        assert engine.validate_field("confirmPassword", "abc", {}) == "Passwords do not match"


class TestRequiredAndEmpty:
    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_required_empty_values(self, engine, value):
        assert engine.validate_field("phone", value) == "Phone number is required"

    def test_required_checked_after_transform(self, engine):
        assert engine.validate_field("email", "   ") == "Email is required"

    @pytest.mark.parametrize("value", ["", "  ", None])
    def test_optional_empty_skips_every_check(self, bare_engine, value):
        bare_engine.registry.add_rule("nickname", {"minLength": 3, "pattern": r"^x+$"})
        assert bare_engine.validate_field("nickname", value, {}) == ""

    def test_required_false_behaves_as_optional(self, bare_engine):
        bare_engine.registry.add_rule("nickname", {"required": False, "minLength": 3})
        assert bare_engine.validate_field("nickname", "") == ""

    def test_required_fallback_message(self, bare_engine):
        bare_engine.registry.add_rule("city", {"required": True})
        assert bare_engine.validate_field("city", "") == "city is required"


class TestOrdering:
    def test_min_length_reported_before_pattern(self, bare_engine):
        bare_engine.registry.add_rule("code", {"minLength": 5, "pattern": r"^[A-Z]+$"})
        bare_engine.registry.add_message("code", {"minLength": "Too short", "pattern": "Letters only"})

        assert bare_engine.validate_field("code", "ab1") == "Too short"

    def test_no_spaces_reported_before_everything_else(self, bare_engine):
        bare_engine.registry.add_rule(
            "code",
            {"noSpaces": True, "noNumbers": True, "minLength": 10, "capitalizeFirst": True},
        )
        assert bare_engine.validate_field("code", "a 1") == "code cannot contain spaces"

    def test_max_length_before_repeating_digits(self, bare_engine):
        bare_engine.registry.add_rule("pin", {"maxLength": 4, "noRepeatingDigits": r"(\d)\1{3}"})
        assert bare_engine.validate_field("pin", "11111") == "pin must be at most 4 characters"

    def test_compound_before_match_field(self, bare_engine):
        bare_engine.registry.add_rule("secret", {"patterns": {"digit": r"\d"}, "matchField": "other"})
        assert bare_engine.validate_field("secret", "abc", {"other": "zzz"}) == (
            "secret does not meet complexity requirements"
        )

    def test_result_is_deterministic(self, engine):
        form = {"password": "Abcdef1!", "confirmPassword": "Abcdef1?"}
        first = engine.validate_field("confirmPassword", form["confirmPassword"], form)
        second = engine.validate_field("confirmPassword", form["confirmPassword"], form)
        assert first == second == "Passwords do not match"


class TestMessages:
    def test_fallback_templates_are_rendered(self, bare_engine):
        bare_engine.registry.add_rule("bio", {"maxLength": 3})
        assert bare_engine.validate_field("bio", "abcd") == "bio must be at most 3 characters"

    def test_registered_template_placeholders(self, bare_engine):
        bare_engine.registry.add_rule("bio", {"minLength": 2, "maxLength": 4})
        bare_engine.registry.add_message("bio", {"maxLength": "Between {minLength} and {maxLength}"})
        assert bare_engine.validate_field("bio", "abcdef") == "Between 2 and 4"

    def test_match_field_fallback_names_other_field(self, bare_engine):
        bare_engine.registry.add_rule("repeat", {"matchField": "original"})
        assert bare_engine.validate_field("repeat", "a", {"original": "b"}) == "repeat does not match original"


class TestTransform:
    def test_transform_does_not_touch_caller_value(self, bare_engine):
        bare_engine.registry.add_rule("tag", {"transform": str.upper, "capitalizeFirst": True})
        value = "lower"
        assert bare_engine.validate_field("tag", value) == ""
        assert value == "lower"

    def test_transformed_value_is_compared_with_match_field(self, bare_engine):
        bare_engine.registry.add_rule("again", {"transform": str.strip, "matchField": "first"})
        assert bare_engine.validate_field("again", " abc ", {"first": "abc"}) == ""

    def test_transform_errors_propagate(self, bare_engine):
        def broken(value):
            raise RuntimeError("boom")

        bare_engine.registry.add_rule("x", {"transform": broken})
        with pytest.raises(RuntimeError):
            bare_engine.validate_field("x", "value")


class TestUnknownFields:
    def test_lenient_by_default(self, engine):
        assert engine.validate_field("nonexistent", "anything") == ""

    def test_strict_mode_reports_unknown_field(self):
        engine = ValidationEngine(RuleRegistry.with_defaults(), strict=True)
        assert engine.validate_field("emial", "a@b.co") == "emial is not a recognized field"

    def test_strict_mode_accepts_registered_empty_rule_set(self):
        registry = RuleRegistry()
        registry.add_rule("a", {})
        engine = ValidationEngine(registry, strict=True)
        assert engine.validate_field("a", "ok") == ""


class TestFieldState:
    def test_empty_required_field_is_neutral(self, engine):
        assert engine.get_field_state("email", "", {}) == FieldState.NEUTRAL
        assert engine.get_field_state("email", "   ") == FieldState.NEUTRAL

    def test_invalid(self, engine):
        assert engine.get_field_state("email", "bad") == FieldState.INVALID

    def test_valid(self, engine):
        assert engine.get_field_state("email", "a@b.co") == FieldState.VALID

    def test_state_compares_as_string(self, engine):
        assert engine.get_field_state("email", "bad") == "invalid"

    def test_field_classes(self, engine):
        assert engine.get_field_classes("email", "bad", base_classes="w-full") == (
            "w-full border-red-500 focus:ring-red-500"
        )
        assert engine.get_field_classes("email", "") == "border-gray-300 focus:ring-blue-500"
        assert engine.get_field_classes("email", "a@b.co") == "border-green-500 focus:ring-green-500"


def test_field_validator_is_bound(engine):
    validate_confirm = engine.get_field_validator("confirmPassword")
    assert validate_confirm("abc", {"password": "abc"}) == ""
    assert validate_confirm("abc") == "Passwords do not match"


def test_default_instance_shortcuts():
    from formrules.validators import (
        validate_confirm_password,
        validate_email,
        validate_full_name,
        validate_login_password,
        validate_password,
        validate_phone,
    )

    assert validate_email("someone@example.com") == ""
    assert validate_password("Abcdef1!") == ""
    assert validate_login_password("") == "Password is required"
    assert validate_full_name("john") == "First letter of Full Name must be capital"
    assert validate_phone("1111111111") == "Enter a valid phone number"
    assert validate_confirm_password("x", {"password": "x"}) == ""


class TestTrailingNewline:
    def test_phone_with_trailing_newline(self, engine):
        assert engine.validate_field("phone", "9876543210\n") == "Enter a valid phone number"

    def test_full_name_with_trailing_newline(self, engine):
        assert engine.validate_field("fullName", "John\n") == (
            "Full Name should only contain letters, and single spaces"
        )

    def test_dollar_anchor_does_not_match_before_newline(self, bare_engine):
        bare_engine.registry.add_rule("zip", {"pattern": r"^\d{5}$"})
        assert bare_engine.validate_field("zip", "12345\n") == "zip format is invalid"
        assert bare_engine.validate_field("zip", "12345") == ""

    def test_escaped_dollar_is_literal(self, bare_engine):
        bare_engine.registry.add_rule("price", {"pattern": r"\d\$"})
        assert bare_engine.validate_field("price", "5$\n") == ""

    def test_compound_sub_pattern_anchor(self, bare_engine):
        bare_engine.registry.add_rule("code", {"patterns": {"ends_digit": r"\d$"}})
        assert bare_engine.validate_field("code", "ab1\n") == "code does not meet complexity requirements"


class TestFalsySettings:
    def test_zero_max_length_is_off(self, bare_engine):
        bare_engine.registry.add_rule("note", {"maxLength": 0})
        assert bare_engine.validate_field("note", "anything") == ""

    def test_empty_match_field_is_off(self, bare_engine):
        bare_engine.registry.add_rule("again", {"matchField": ""})
        assert bare_engine.validate_field("again", "abc", {"": "xyz"}) == ""

    def test_false_flag_is_off(self, bare_engine):
        bare_engine.registry.add_rule("name", {"noNumbers": False})
        assert bare_engine.validate_field("name", "R2D2") == ""
