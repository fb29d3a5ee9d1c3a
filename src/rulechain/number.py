"""Numeric validator: inclusive bounds and sign rules."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Callable

from .base import BaseValidator
from .messages import number_messages
from .rules import Bound, invalid_setting


def _on_numbers(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Make a numeric predicate fail (rather than raise) for non-numeric input."""
    return lambda value: isinstance(value, (Real, Decimal)) and predicate(value)


class NumberValidator(BaseValidator):
    """Chainable validator for numbers.

    ``min``/``max`` are inclusive and must keep ``min <= max``;
    ``is_negative`` excludes ``is_positive`` and ``is_non_negative``.
    """

    def __init__(self, name: str | None = None):
        super().__init__(name)
        self.min_bound = Bound(-math.inf, number_messages.min)
        self.max_bound = Bound(math.inf, number_messages.max)

    def min(self, value: float, message: str | None = None) -> NumberValidator:
        """Require ``input >= value``."""
        self._ensure_mutable()
        if value > self.max_bound.value:
            raise invalid_setting(number_messages.min_greater_than_max, min=value, max=self.max_bound.value)
        self.min_bound = self.min_bound.set(value, message or number_messages.min)
        return self._set_option_rule("min", _on_numbers(lambda number: number >= value), self.min_bound.message)

    def max(self, value: float, message: str | None = None) -> NumberValidator:
        """Require ``input <= value``."""
        self._ensure_mutable()
        if value < self.min_bound.value:
            raise invalid_setting(number_messages.max_smaller_than_min, min=self.min_bound.value, max=value)
        self.max_bound = self.max_bound.set(value, message or number_messages.max)
        return self._set_option_rule("max", _on_numbers(lambda number: number <= value), self.max_bound.message)

    def is_positive(self, message: str | None = None) -> NumberValidator:
        """Require ``input > 0``."""
        self._ensure_mutable()
        if self.has_option("is_negative"):
            raise invalid_setting(number_messages.positive_and_negative, option="is_positive")
        return self._set_option_rule("is_positive", _on_numbers(lambda number: number > 0),
                                     message or number_messages.is_positive)

    def is_non_negative(self, message: str | None = None) -> NumberValidator:
        """Require ``input >= 0``."""
        self._ensure_mutable()
        if self.has_option("is_negative"):
            raise invalid_setting(number_messages.negative_and_non_negative, option="is_non_negative")
        return self._set_option_rule("is_non_negative", _on_numbers(lambda number: number >= 0),
                                     message or number_messages.is_non_negative)

    def is_negative(self, message: str | None = None) -> NumberValidator:
        """Require ``input < 0``."""
        self._ensure_mutable()
        if self.has_option("is_positive") or self.has_option("is_non_negative"):
            raise invalid_setting(number_messages.negative_and_positive_or_non_negative,
                                  option="is_negative")
        return self._set_option_rule("is_negative", _on_numbers(lambda number: number < 0),
                                     message or number_messages.is_negative)
