"""Rule registry — per-field rule sets and message sets with merge-on-write.

There is no removal operation: registering again shallow-merges the new
keys over the stored ones. Writes are serialized with a lock; reads hand
out frozen models and are safe while no write is in flight.
"""

import threading
from typing import Any, Mapping, Union

import structlog

from formrules.validators.defaults import DEFAULT_MESSAGES, DEFAULT_RULES
from formrules.validators.models import MessageSet, RuleSet

logger = structlog.get_logger()

RuleInput = Union[RuleSet, Mapping[str, Any]]
MessageInput = Union[MessageSet, Mapping[str, str]]

_EMPTY_RULES = RuleSet()
_EMPTY_MESSAGES = MessageSet()


class RuleRegistry:
    """Keyed storage of RuleSet / MessageSet per field name."""

    def __init__(self):
        self._rules: dict[str, RuleSet] = {}
        self._messages: dict[str, MessageSet] = {}
        self._lock = threading.RLock()

    @classmethod
    def with_defaults(cls) -> "RuleRegistry":
        """Create a registry seeded with the default rule table."""
        registry = cls()
        for field_name, rules in DEFAULT_RULES.items():
            registry._store(registry._rules, field_name, _coerce(RuleSet, rules), _EMPTY_RULES)
        for field_name, messages in DEFAULT_MESSAGES.items():
            registry._store(registry._messages, field_name, _coerce(MessageSet, messages), _EMPTY_MESSAGES)
        return registry

    def add_rule(self, field_name: str, rules: RuleInput) -> RuleSet:
        """Shallow-merge constraints into the field's rule set.

        Keys present in ``rules`` replace the stored values wholesale (a new
        ``patterns`` mapping replaces the old one); absent keys are untouched.

        Raises:
            pydantic.ValidationError: if a constraint is unknown or malformed
        """
        partial = _coerce(RuleSet, rules)
        merged = self._store(self._rules, field_name, partial, _EMPTY_RULES)
        logger.debug("rule_registered", field=field_name, constraints=sorted(partial.model_fields_set))
        return merged

    def add_message(self, field_name: str, messages: MessageInput) -> MessageSet:
        """Shallow-merge message templates into the field's message set."""
        partial = _coerce(MessageSet, messages)
        merged = self._store(self._messages, field_name, partial, _EMPTY_MESSAGES)
        logger.debug("messages_registered", field=field_name, constraints=sorted(partial.model_fields_set))
        return merged

    def get_rule(self, field_name: str) -> RuleSet:
        """Current rule set, or an empty one for an unregistered field."""
        return self._rules.get(field_name, _EMPTY_RULES)

    def get_messages(self, field_name: str) -> MessageSet:
        """Current message set, or an empty one for an unregistered field."""
        return self._messages.get(field_name, _EMPTY_MESSAGES)

    def has_field(self, field_name: str) -> bool:
        """True once any rule or message was registered for the field."""
        return field_name in self._rules or field_name in self._messages

    def fields(self) -> list[str]:
        """Sorted names of every registered field."""
        with self._lock:
            return sorted(set(self._rules) | set(self._messages))

    def _store(self, table: dict, field_name: str, partial, empty):
        with self._lock:
            merged = _merge(table.get(field_name, empty), partial)
            table[field_name] = merged
        return merged


def _coerce(model: type, value: Any):
    """Validate registration input into a (partial) model."""
    if isinstance(value, model):
        return value
    return model.model_validate(dict(value))


def _merge(current, partial):
    """Overlay the keys explicitly set on ``partial`` onto ``current``."""
    update: dict[str, Any] = {name: getattr(partial, name) for name in partial.model_fields_set}
    return current.model_copy(update=update)
