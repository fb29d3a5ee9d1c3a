"""Base validator: nullability contract, rule list and the terminal operations.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from .exceptions import ConfigurationError, ValidationError
from .messages import build_error_message, common_messages, messages
from .rules import Nullability, Rule, ValidatorKind, check_null, collect_failures
from .settings import get_settings

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="BaseValidator")


class BaseValidator:
    """Validator holding an ordered list of rules.

    Configuration calls return the validator itself so they can be chained::

        validator = BaseValidator().not_null().add_rule(lambda v: v != 0, "zero")
        validator.get_error_messages(0)
        # ['zero']

    Every rule is evaluated on every call; a failing input collects one
    message per failing rule, in insertion order.
    """

    kind = ValidatorKind.SCALAR

    def __init__(self, name: str | None = None):
        """Initialize the validator.

        Args:
            name: Optional field name used in raised error messages
        """
        self.name = name
        self.nullability = Nullability()
        self._rules: list[Rule] = []
        self._option_slots: dict[str, int] = {}
        self._frozen = False

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def nullable(self) -> bool:
        return self.nullability.nullable

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self: V) -> V:
        """Seal the configuration; later configuration calls raise ConfigurationError."""
        self._frozen = True
        return self

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError(common_messages.frozen, context={"validator": self.name})

    def _push(self: V, predicate: Callable[[Any], bool], message: str) -> V:
        self._ensure_mutable()
        self._rules.append(Rule(predicate, message))
        return self

    def _set_option_rule(self: V, option: str, predicate: Callable[[Any], bool], message: str) -> V:
        """Register the rule backing a named option.

        Repeating an option replaces its rule in place, so the option keeps
        its first evaluation position and is never reported twice.
        """
        self._ensure_mutable()
        rule = Rule(predicate, message)
        if option in self._option_slots:
            self._rules[self._option_slots[option]] = rule
        else:
            self._option_slots[option] = len(self._rules)
            self._rules.append(rule)
        return self

    def has_option(self, option: str) -> bool:
        return option in self._option_slots

    def add_rule(self: V, predicate: Callable[[Any], bool], message: str | None = None) -> V:
        """Append a custom rule (fluent API).

        Args:
            predicate: Callable returning True when the value is acceptable
            message: Message reported on failure; defaults to the generic custom-rule text

        Returns:
            Self for chaining
        """
        return self._push(predicate, message if message is not None else messages.custom_rule)

    def is_nullable(self: V) -> V:
        """Accept None as a valid input."""
        self._ensure_mutable()
        self.nullability = self.nullability.allow_null()
        return self

    def not_null(self: V, message: str | None = None) -> V:
        """Report None as a validation failure with ``message``."""
        self._ensure_mutable()
        self.nullability = self.nullability.forbid_null(message)
        return self

    def get_error_messages(self, value: Any) -> list[str]:
        """Return the messages of every failing rule, in insertion order."""
        null_errors = check_null(self.nullability, value, self.name)
        if null_errors is not None:
            return null_errors
        return self._check(value)

    def _check(self, value: Any) -> list[str]:
        return collect_failures(self._rules, value)

    def get_errors(self, value: Any) -> Any:
        """Structured errors; scalar validators report the flat message list."""
        return self.get_error_messages(value)

    def validate(self, value: Any) -> None:
        """Raise ValidationError carrying the failing messages, if any."""
        errors = self.get_error_messages(value)
        if errors:
            self._fail(errors)

    def assert_is_valid(self, value: Any) -> None:
        self.validate(value)

    def is_valid(self, value: Any) -> bool:
        """True when ``validate`` does not raise a ValidationError.

        Configuration errors and contract violations propagate.
        """
        try:
            self.validate(value)
        except ValidationError:
            return False
        return True

    def _fail(self, errors: Any) -> None:
        if get_settings().log_failures:
            logger.debug(f"Validation failed for {self.name or type(self).__name__}: {errors}")
        raise ValidationError(build_error_message(self.name), errors, context={"validator": self.name})
