"""String validator with length, character-class and format rules.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from . import predicates
from .base import BaseValidator
from .messages import messages
from .rules import Bound, conflict, invalid_setting

# Options that may not be combined with the key option when they are already
# set on the same validator. Pairs appear on both sides except
# only_numbers -> no_special_characters, which is only rejected in that order.
CONFLICTS: dict[str, tuple[str, ...]] = {
    "fixed_length": ("min_length", "max_length"),
    "min_length": ("fixed_length",),
    "max_length": ("fixed_length",),
    "only_numbers": ("only_characters", "no_numbers", "require_special_character"),
    "only_characters": ("only_numbers", "require_special_character"),
    "no_numbers": ("only_numbers", "require_number"),
    "no_special_characters": ("only_numbers", "require_special_character"),
    "require_special_character": ("only_numbers", "only_characters", "no_special_characters"),
    "require_number": ("no_numbers",),
}


def _on_strings(predicate: Callable[[str], bool]) -> Callable[[Any], bool]:
    """Make a string predicate fail (rather than raise) for non-string input."""
    return lambda value: isinstance(value, str) and predicate(value)


class Validator(BaseValidator):
    """Chainable validator for strings.

    Example:
        ```python
        password = (
            Validator("password")
            .min_length(8)
            .require_uppercase()
            .require_number()
            .no_whitespaces()
        )
        password.get_error_messages("abc")
        # ['the value does not meet the minimum length',
        #  'the value must contain at least one uppercase letter',
        #  'the value must contain at least one number']
        ```

    Length bounds are inclusive. Incompatible options (see ``CONFLICTS``)
    raise ConfigurationError at configuration time.
    """

    def __init__(self, name: str | None = None):
        super().__init__(name)
        self.min_bound = Bound(0, messages.min_length)
        self.max_bound = Bound(math.inf, messages.max_length)
        self.fixed_bound = Bound(0, messages.fixed_length)

    def _check_conflicts(self, option: str) -> None:
        for other in CONFLICTS.get(option, ()):
            if self.has_option(other):
                raise conflict(option, other)

    def _option(self, option: str, predicate: Callable[[str], bool], message: str | None,
                default: str) -> Validator:
        self._ensure_mutable()
        self._check_conflicts(option)
        return self._set_option_rule(option, _on_strings(predicate), message or default)

    # Length

    def not_empty(self, message: str | None = None) -> Validator:
        """Reject the empty string."""
        return self._option("not_empty", predicates.is_not_empty, message, messages.not_empty)

    def not_blank(self, message: str | None = None) -> Validator:
        """Reject empty and whitespace-only strings."""
        return self._option("not_blank", predicates.is_not_blank, message, messages.not_blank)

    def min_length(self, length: int, message: str | None = None) -> Validator:
        """Require ``len(value) >= length``."""
        self._ensure_mutable()
        self._check_conflicts("min_length")
        if length < 0:
            raise invalid_setting(messages.min_length_smaller_than_zero, option="min_length", value=length)
        if length > self.max_bound.value:
            raise invalid_setting(messages.min_length_greater_than_max, min_length=length,
                                  max_length=self.max_bound.value)
        self.min_bound = self.min_bound.set(length, message or messages.min_length)
        return self._set_option_rule("min_length", _on_strings(lambda value: len(value) >= length),
                                     self.min_bound.message)

    def max_length(self, length: int, message: str | None = None) -> Validator:
        """Require ``len(value) <= length``."""
        self._ensure_mutable()
        self._check_conflicts("max_length")
        if length < 1:
            raise invalid_setting(messages.max_length_smaller_than_one, option="max_length", value=length)
        if length < self.min_bound.value:
            raise invalid_setting(messages.max_length_smaller_than_min, min_length=self.min_bound.value,
                                  max_length=length)
        self.max_bound = self.max_bound.set(length, message or messages.max_length)
        return self._set_option_rule("max_length", _on_strings(lambda value: len(value) <= length),
                                     self.max_bound.message)

    def fixed_length(self, length: int, message: str | None = None) -> Validator:
        """Require ``len(value) == length``; excludes min_length()/max_length()."""
        self._ensure_mutable()
        self._check_conflicts("fixed_length")
        if length < 1:
            raise invalid_setting(messages.fixed_length_smaller_than_one, option="fixed_length", value=length)
        self.fixed_bound = self.fixed_bound.set(length, message or messages.fixed_length)
        return self._set_option_rule(
            "fixed_length", _on_strings(lambda value: predicates.has_length(value, length)),
            self.fixed_bound.message)

    # Character classes

    def require_uppercase(self, message: str | None = None) -> Validator:
        """Require at least one ASCII uppercase letter."""
        return self._option("require_uppercase", predicates.contains_uppercase, message,
                            messages.has_uppercase)

    def require_lowercase(self, message: str | None = None) -> Validator:
        """Require at least one ASCII lowercase letter."""
        return self._option("require_lowercase", predicates.contains_lowercase, message,
                            messages.has_lowercase)

    def require_number(self, message: str | None = None) -> Validator:
        """Require at least one digit."""
        return self._option("require_number", predicates.contains_numbers, message,
                            messages.has_number)

    def require_special_character(self, message: str | None = None) -> Validator:
        """Require at least one non-alphanumeric character."""
        return self._option("require_special_character", predicates.contains_special_character,
                            message, messages.has_special_character)

    def no_whitespaces(self, message: str | None = None) -> Validator:
        """Reject any whitespace character."""
        return self._option("no_whitespaces", predicates.not_contains_whitespace, message,
                            messages.no_whitespaces)

    def no_numbers(self, message: str | None = None) -> Validator:
        """Reject any digit."""
        return self._option("no_numbers", predicates.not_contains_numbers, message,
                            messages.no_numbers)

    def no_special_characters(self, message: str | None = None) -> Validator:
        """Allow only ASCII letters and digits."""
        return self._option("no_special_characters", predicates.not_contains_special_character,
                            message, messages.no_special_characters)

    def only_numbers(self, message: str | None = None) -> Validator:
        """Digits 0-9 only; the empty string fails."""
        return self._option("only_numbers", predicates.contains_only_numbers, message,
                            messages.only_numbers)

    def only_characters(self, message: str | None = None) -> Validator:
        """Letters a-z/A-Z only."""
        return self._option("only_characters", predicates.contains_only_letters, message,
                            messages.only_characters)

    def no_repeated_characters(self, message: str | None = None) -> Validator:
        """Reject strings in which any character occurs more than once."""
        return self._option("no_repeated_characters", predicates.not_contains_repeated_chars,
                            message, messages.no_repeated_characters)

    # Formats

    def is_email(self, message: str | None = None) -> Validator:
        """Check the ``local@domain.tld`` shape."""
        return self._option("is_email", predicates.is_email, message, messages.is_email)

    def is_url(self, strict: bool = False, message: str | None = None) -> Validator:
        """Check URL shape; ``strict`` requires a scheme and a host or path."""
        return self._option("is_url", lambda value: predicates.is_url(value, strict), message,
                            messages.is_url)

    def is_ip(self, message: str | None = None) -> Validator:
        """Check for a dotted-quad IPv4 address."""
        return self._option("is_ip", predicates.is_ip, message, messages.is_ip)

    def is_iso8601(self, message: str | None = None) -> Validator:
        """Check for an ISO8601 date or date-time naming a real calendar day."""
        return self._option("is_iso8601", predicates.is_iso8601, message, messages.is_iso8601)

    def is_jwt(self, message: str | None = None) -> Validator:
        """Check for three base64url segments separated by dots."""
        return self._option("is_jwt", predicates.is_jwt, message, messages.is_jwt)

    def is_btc_address(self, message: str | None = None) -> Validator:
        """Check the shape of a legacy or bech32 Bitcoin address."""
        return self._option("is_btc_address", predicates.is_btc_address, message,
                            messages.is_btc_address)

    def is_eth_address(self, message: str | None = None) -> Validator:
        """Check for ``0x`` followed by 40 hex digits."""
        return self._option("is_eth_address", predicates.is_eth_address, message,
                            messages.is_eth_address)


StringValidator = Validator
