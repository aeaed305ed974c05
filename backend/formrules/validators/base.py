"""Base check — abstract class implementing the Strategy Pattern.

Each check evaluates a single constraint of a RuleSet. The engine walks the
checks in a fixed order and stops at the first one that fails.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from formrules.validators.models import RuleSet


class BaseCheck(ABC):
    """Abstract base for all constraint checks.

    Contract:
        - fails() is deterministic: same input → same output
        - fails() is only called when the constraint is set on the rule set
        - fails() receives a non-empty string (empty values never reach checks)
        - No I/O, no clock, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Constraint name on RuleSet / MessageSet (snake_case)."""
        ...

    @abstractmethod
    def fails(self, value: str, rules: RuleSet, form_values: Mapping[str, Any]) -> bool:
        """Return True if the value violates this constraint.

        Args:
            value: The (possibly transformed) field value
            rules: The field's full rule set
            form_values: Every value in the current submission

        Returns:
            True when the constraint is violated
        """
        ...

    def applies(self, rules: RuleSet) -> bool:
        """Falsy settings (None, False, 0, "") leave the constraint off."""
        return bool(self._setting(rules))

    # ── Helper Methods ──

    def _setting(self, rules: RuleSet) -> Any:
        """Configured value of this check's constraint."""
        return getattr(rules, self.name)
