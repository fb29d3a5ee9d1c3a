"""Array validator: structural rules on the sequence plus a child validator per element.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable

from .base import BaseValidator
from .exceptions import ConfigurationError, ContractViolationError
from .messages import array_messages, common_messages
from .rules import NOT_NULL_KEY, Bound, ValidatorKind, check_null, invalid_setting, unique_messages

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], bool]

SCALAR_TYPES = (str, bytes)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _on_sequences(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    return lambda value: is_sequence(value) and predicate(value)


def strict_equals(first: Any, second: Any) -> bool:
    """Identity for objects and containers; value equality for strings, bytes and numbers.

    Booleans only equal booleans, so ``1`` and ``True`` differ, as do two
    distinct dicts with the same content. ``1`` and ``1.0`` are equal.
    """
    if first is second:
        return True
    if isinstance(first, bool) or isinstance(second, bool):
        return False
    if isinstance(first, numbers.Number) and isinstance(second, numbers.Number):
        return first == second
    return type(first) is type(second) and isinstance(first, SCALAR_TYPES) and first == second


class ArrayValidator(BaseValidator):
    """Validate a list by its own structural rules and a child validator per element.

    The child may be any validator kind, including another ``ArrayValidator``
    or a ``SchemaValidator``; it is only queried, never reconfigured.

    Example:
        ```python
        ages = ArrayValidator(NumberValidator().min(0)).not_empty()
        ages.get_error_messages([1, -2, -3])
        # ['the value does not meet the minimum value']
        ages.get_errors([1, -2])
        # [{'-2': ['the value does not meet the minimum value']}]
        ```
    """

    kind = ValidatorKind.ARRAY

    def __init__(self, validator: BaseValidator, name: str | None = None):
        """Initialize with the validator applied to every element.

        Args:
            validator: Element validator
            name: Optional field name used in raised error messages
        """
        super().__init__(name)
        if not isinstance(validator, BaseValidator):
            raise ConfigurationError(
                "ArrayValidator requires a validator for its elements",
                context={"type": type(validator).__name__},
            )
        self.validator = validator
        self.comparator_func: Comparator = strict_equals
        self.min_bound = Bound(0, array_messages.min)
        self.max_bound = Bound(math.inf, array_messages.max)

    def freeze(self) -> ArrayValidator:
        self.validator.freeze()
        return super().freeze()

    def comparator(self, func: Comparator) -> ArrayValidator:
        """Replace the equality function used by ``no_duplicates`` (default ``strict_equals``)."""
        self._ensure_mutable()
        self.comparator_func = func
        return self

    def min_length(self, length: int, message: str | None = None) -> ArrayValidator:
        """Require at least ``length`` elements."""
        self._ensure_mutable()
        if length < 0:
            raise invalid_setting(array_messages.min_smaller_than_zero, option="min_length", value=length)
        if self.max_bound.status and length > self.max_bound.value:
            raise invalid_setting(common_messages.min_greater_than_max, min_length=length,
                                  max_length=self.max_bound.value)
        self.min_bound = self.min_bound.set(length, message or array_messages.min)
        return self._set_option_rule("min_length", _on_sequences(lambda items: len(items) >= length),
                                     self.min_bound.message)

    def max_length(self, length: int, message: str | None = None) -> ArrayValidator:
        """Allow at most ``length`` elements."""
        self._ensure_mutable()
        if length < 0:
            raise invalid_setting(array_messages.max_smaller_than_zero, option="max_length", value=length)
        if self.min_bound.status and length < self.min_bound.value:
            raise invalid_setting(common_messages.max_smaller_than_min, min_length=self.min_bound.value,
                                  max_length=length)
        self.max_bound = self.max_bound.set(length, message or array_messages.max)
        return self._set_option_rule("max_length", _on_sequences(lambda items: len(items) <= length),
                                     self.max_bound.message)

    def not_empty(self, message: str | None = None) -> ArrayValidator:
        """Reject empty arrays."""
        return self._set_option_rule("not_empty", _on_sequences(lambda items: len(items) > 0),
                                     message or array_messages.not_empty)

    def no_duplicates(self, message: str | None = None) -> ArrayValidator:
        """Reject arrays where any two elements compare equal under the comparator."""
        return self._set_option_rule("no_duplicates", _on_sequences(lambda items: not self.has_duplicates(items)),
                                     message or array_messages.no_duplicates)

    def has_duplicates(self, items: list[Any]) -> bool:
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if self.comparator_func(items[i], items[j]):
                    return True
        return False

    def get_structural_errors(self, items: Any) -> list[str]:
        """Failures of the array's own rules, ignoring the elements."""
        if not is_sequence(items):
            return [array_messages.default_error]
        return self._check(items)

    def get_error_messages(self, value: Any) -> list[str]:
        """Structural failures followed by element failures, each message once."""
        null_errors = check_null(self.nullability, value, self.name)
        if null_errors is not None:
            return null_errors
        errors = self.get_structural_errors(value)
        if is_sequence(value):
            for item in value:
                if item is None:
                    errors.extend(self._null_element_errors())
                else:
                    errors.extend(self.validator.get_error_messages(item))
        return unique_messages(errors)

    def get_errors(self, value: Any) -> list[dict[str, Any]]:
        """Per-element structured errors.

        Entries are ``{str(element): [messages]}`` for scalar children,
        ``{"data": element, "errors": ...}`` for schema and array children, and
        ``{"not_null": [message]}`` for rejected None elements. The array's own
        structural failures are reported by ``get_error_messages``.
        """
        if value is None:
            null_errors = check_null(self.nullability, value, self.name)
            return [{NOT_NULL_KEY: null_errors}] if null_errors else []
        if not is_sequence(value):
            return [{"data": value, "errors": [array_messages.default_error]}]

        entries: list[dict[str, Any]] = []
        for item in value:
            if item is None:
                null_errors = self._null_element_errors()
                if null_errors:
                    entries.append({NOT_NULL_KEY: null_errors})
                continue
            entry = self._element_entry(item)
            if entry:
                entries.append(entry)
        return entries

    def _element_entry(self, item: Any) -> dict[str, Any] | None:
        child = self.validator
        if child.kind is ValidatorKind.SCHEMA:
            errors = child.get_errors(item)
            return {"data": item, "errors": errors} if errors else None
        if child.kind is ValidatorKind.ARRAY:
            structural = child.get_structural_errors(item)
            if structural:
                return {"data": item, "errors": structural}
            nested = child.get_errors(item)
            return {"data": item, "errors": nested} if nested else None
        if child.kind in (ValidatorKind.SCALAR, ValidatorKind.CARD):
            messages = child.get_error_messages(item)
            return {str(item): messages} if messages else None
        raise ConfigurationError(f"Unsupported validator kind: {child.kind}", context={"kind": child.kind})

    def _null_element_errors(self) -> list[str]:
        """Resolve a None element: the element policy wins, then the array's not_null."""
        element_policy = self.validator.nullability
        if element_policy.nullable:
            return []
        if element_policy.not_null:
            return [element_policy.message]
        if self.nullability.not_null:
            return [self.nullability.message]
        logger.debug(f"None element in array {self.name or '<unnamed>'} without a nullability policy")
        raise ContractViolationError(common_messages.null_input, context={"validator": self.name})
