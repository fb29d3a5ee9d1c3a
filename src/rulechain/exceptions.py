"""Exception hierarchy for rulechain validators.

Three failure categories stay distinguishable:

- ``ConfigurationError``: raised while chaining setup calls when two options
  are incompatible or a bound invariant (``min <= max``) would break.
- ``ContractViolationError``: ``None`` reached a validator configured with
  neither ``is_nullable()`` nor ``not_null()``.
- ``ValidationError``: one or more rules failed. ``CreditCardError`` is the
  card-specific flavour carrying a structured error object.

Example:
    ```python
    from rulechain import NumberValidator, ValidationError

    try:
        NumberValidator().min(18).validate(13)
    except ValidationError as e:
        e.errors
        # ['the value does not meet the minimum value']
    ```

Only ``ValidationError`` is swallowed by ``is_valid()``; the other two always
propagate to the caller.
"""

from typing import Any, Dict


class RulechainError(Exception):
    """Base exception for all rulechain errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (option names, validator name, ...)
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(RulechainError):
    """Raised when a configuration call conflicts with the validator's current setup.

    Example:
        ```python
        Validator().fixed_length(4).min_length(2)
        # ConfigurationError: min_length() cannot be used with fixed_length()
        ```
    """

    pass


class ContractViolationError(RulechainError):
    """Raised when ``None`` reaches a validator with no nullability policy.

    This is a usage-contract failure, not a validation failure: callers of
    ``get_error_messages()`` expect domain messages, so the complaint is
    raised instead of being folded into the list.
    """

    pass


class ValidationError(RulechainError):
    """Raised when an input fails one or more rules.

    Attributes:
        errors: Flat list of messages, or a structured mapping/list keyed by
            field name or element, depending on the validator kind.
    """

    def __init__(
        self,
        message: str,
        errors: Any = None,
        context: Dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.errors = errors if errors is not None else []


class CreditCardError(ValidationError):
    """Raised by ``CardValidator.validate``.

    ``errors`` is a dict with any of the keys ``number``, ``expiration_date``
    and ``messages``.
    """

    def __init__(self, errors: Dict[str, Any], context: Dict[str, Any] | None = None):
        super().__init__("the card is not valid", errors, context=context)


__all__ = [
    "RulechainError",
    "ConfigurationError",
    "ContractViolationError",
    "ValidationError",
    "CreditCardError",
]
