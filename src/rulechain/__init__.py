"""Composable input validators.

This package provides chainable validators for untrusted input:

- **Scalars**: ``Validator`` (strings) and ``NumberValidator``
- **Composites**: ``ArrayValidator`` and ``SchemaValidator``, recursing into child validators
- **Cards**: ``CardValidator`` with Luhn, provider and expiration checks
- **Helpers**: predicate, date and sanitizer functions usable on their own

Example:
    ```python
    from rulechain import NumberValidator, SchemaValidator, Validator

    user = SchemaValidator({
        "name": Validator().min_length(3),
        "age": NumberValidator().min(18),
    })
    user.get_errors({"name": "Jo", "age": 13})
    # {'name': ['the value does not meet the minimum length'],
    #  'age': ['the value does not meet the minimum value']}
    ```
"""

from rulechain.arrays import ArrayValidator
from rulechain.base import BaseValidator
from rulechain.cards import (
    CardDetails,
    CardProvider,
    CardValidator,
    is_card_number_valid,
    is_credit_card_valid,
    is_expiration_valid,
    is_provider_valid,
    luhn_checksum,
)
from rulechain.exceptions import (
    ConfigurationError,
    ContractViolationError,
    CreditCardError,
    RulechainError,
    ValidationError,
)
from rulechain.number import NumberValidator
from rulechain.rules import Bound, Nullability, Rule, ValidatorKind
from rulechain.schema import SchemaValidator
from rulechain.settings import ValidatorSettings, configure, get_settings, reset_settings
from rulechain.strings import StringValidator, Validator

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Validators
    "BaseValidator",
    "Validator",
    "StringValidator",
    "NumberValidator",
    "ArrayValidator",
    "SchemaValidator",
    "CardValidator",
    # Rule values
    "Rule",
    "Bound",
    "Nullability",
    "ValidatorKind",
    # Cards
    "CardDetails",
    "CardProvider",
    "luhn_checksum",
    "is_card_number_valid",
    "is_provider_valid",
    "is_expiration_valid",
    "is_credit_card_valid",
    # Exceptions
    "RulechainError",
    "ConfigurationError",
    "ContractViolationError",
    "ValidationError",
    "CreditCardError",
    # Settings
    "ValidatorSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
