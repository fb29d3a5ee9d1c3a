"""Schema validator: a mapping of field names to child validators."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from .base import BaseValidator
from .exceptions import ConfigurationError
from .messages import messages
from .rules import NOT_NULL_KEY, ValidatorKind, check_null, invalid_setting

INPUT_KEY = "input"


class SchemaValidator(BaseValidator):
    """Validate a mapping field by field.

    Each field is read from the input (missing keys read as None) and handed
    to its validator. The schema holds no rules of its own beyond nullability.

    Example:
        ```python
        user = SchemaValidator({
            "name": Validator().min_length(3),
            "age": NumberValidator().min(18),
        })
        user.get_errors({"name": "Al", "age": 13})
        # {'name': ['the value does not meet the minimum length'],
        #  'age': ['the value does not meet the minimum value']}
        ```
    """

    kind = ValidatorKind.SCHEMA

    def __init__(self, schema: Mapping[str, BaseValidator], name: str | None = None):
        super().__init__(name)
        for field_name, validator in schema.items():
            if not isinstance(validator, BaseValidator):
                raise ConfigurationError(
                    f"Field '{field_name}' must map to a validator",
                    context={"field": field_name, "type": type(validator).__name__},
                )
        self._schema = dict(schema)

    @property
    def fields(self) -> Mapping[str, BaseValidator]:
        return MappingProxyType(self._schema)

    def freeze(self) -> SchemaValidator:
        for validator in self._schema.values():
            validator.freeze()
        return super().freeze()

    def add_rule(self, predicate: Callable[[Any], bool], message: str | None = None) -> SchemaValidator:
        raise invalid_setting(
            "SchemaValidator has no rules of its own; add rules to the field validators",
            validator=self.name,
        )

    def get_error_messages(self, value: Any) -> list[str]:
        """Concatenate the flat messages of every field, in declaration order."""
        null_errors = check_null(self.nullability, value, self.name)
        if null_errors is not None:
            return null_errors
        if not isinstance(value, Mapping):
            return [messages.default_error]
        errors: list[str] = []
        for field_name, validator in self._schema.items():
            errors.extend(validator.get_error_messages(value.get(field_name)))
        return errors

    def get_errors(self, value: Any) -> dict[str, Any]:
        """Field name to errors, omitting fields that passed.

        Schema-valued fields nest their own dict; every other field reports
        its flat message list.
        """
        if value is None:
            null_errors = check_null(self.nullability, value, self.name)
            return {NOT_NULL_KEY: null_errors} if null_errors else {}
        if not isinstance(value, Mapping):
            return {INPUT_KEY: [messages.default_error]}

        result: dict[str, Any] = {}
        for field_name, validator in self._schema.items():
            field_value = value.get(field_name)
            if validator.kind is ValidatorKind.SCHEMA:
                errors = validator.get_errors(field_value)
            else:
                errors = validator.get_error_messages(field_value)
            if errors:
                result[field_name] = errors
        return result

    def validate(self, value: Any) -> None:
        """Raise ValidationError carrying the structured error dict."""
        errors = self.get_errors(value)
        if errors:
            self._fail(errors)
