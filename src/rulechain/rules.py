"""Rule values and the shared evaluation functions every validator is built from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable

from .exceptions import ConfigurationError, ContractViolationError
from .messages import base_messages, common_messages, messages

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]

# Structured-error key for rejected None values
NOT_NULL_KEY = "not_null"


class ValidatorKind(Enum):
    """Closed set of validator shapes composites know how to recurse into."""

    SCALAR = "scalar"
    ARRAY = "array"
    SCHEMA = "schema"
    CARD = "card"


@dataclass(frozen=True)
class Rule:
    """A predicate paired with the message reported when it returns False."""

    predicate: Predicate
    message: str = messages.custom_rule

    def passes(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def __call__(self, value: Any) -> bool:
        return self.passes(value)


@dataclass(frozen=True)
class Bound:
    """One side of a range constraint.

    ``status`` is True once the bound was set explicitly by a configuration
    call; unset bounds still carry their neutral value (0 / infinity) so the
    ``min <= max`` comparison works without special cases.
    """

    value: float
    message: str
    status: bool = False

    def set(self, value: float, message: str) -> Bound:
        """Record an explicit bound; callers pass the catalog default when no message is given."""
        return replace(self, value=value, message=message, status=True)


@dataclass(frozen=True)
class Nullability:
    """Flat nullability record: at most one of ``nullable``/``not_null`` is set."""

    nullable: bool = False
    not_null: bool = False
    message: str = common_messages.not_null

    def allow_null(self) -> Nullability:
        if self.not_null:
            raise ConfigurationError(
                base_messages.nullable_and_not_null,
                context={"option": "is_nullable", "conflicts_with": "not_null"},
            )
        return replace(self, nullable=True)

    def forbid_null(self, message: str | None = None) -> Nullability:
        if self.nullable:
            raise ConfigurationError(
                base_messages.nullable_and_not_null,
                context={"option": "not_null", "conflicts_with": "is_nullable"},
            )
        return replace(self, not_null=True, message=message or common_messages.not_null)

    @property
    def configured(self) -> bool:
        return self.nullable or self.not_null


def is_missing(value: Any) -> bool:
    return value is None


def check_null(nullability: Nullability, value: Any, name: str | None = None) -> list[str] | None:
    """Apply the nullability contract to ``value``.

    Returns:
        None when ``value`` is present and the rules should run, an empty
        list when ``value`` is None and allowed, or a single-message list
        when ``value`` is None and forbidden.

    Raises:
        ContractViolationError: ``value`` is None and no policy is configured.
    """
    if not is_missing(value):
        return None
    if nullability.nullable:
        return []
    if nullability.not_null:
        return [nullability.message]
    logger.debug(f"None reached validator {name or '<unnamed>'} without a nullability policy")
    raise ContractViolationError(common_messages.null_input, context={"validator": name})


def collect_failures(rules: Iterable[Rule], value: Any) -> list[str]:
    """Evaluate every rule in order and return the messages of those that fail."""
    return [rule.message for rule in rules if not rule.passes(value)]


def unique_messages(errors: Iterable[str]) -> list[str]:
    """Drop repeated messages, keeping the first occurrence of each."""
    seen: set[str] = set()
    result = []
    for error in errors:
        if error not in seen:
            seen.add(error)
            result.append(error)
    return result


def conflict(option: str, other: str) -> ConfigurationError:
    """Build the error raised when two configuration options cannot be combined."""
    message = f"{option}() cannot be used with {other}()"
    logger.debug(message)
    return ConfigurationError(message, context={"option": option, "conflicts_with": other})


def invalid_setting(message: str, **context: Any) -> ConfigurationError:
    """Build the error raised when a configuration value breaks an invariant."""
    logger.debug(f"{message} ({context})")
    return ConfigurationError(message, context=context)
