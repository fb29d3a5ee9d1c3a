"""Payment card validation: Luhn checksum, provider number shapes and expiration dates.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping

from . import settings
from .base import BaseValidator
from .dates import parse_expiration
from .exceptions import CreditCardError, ValidationError
from .messages import build_error_message, card_messages
from .rules import NOT_NULL_KEY, ValidatorKind, check_null, collect_failures

logger = logging.getLogger(__name__)


class CardProvider(str, Enum):
    VISA = "Visa"
    MASTERCARD = "MasterCard"
    AMERICAN_EXPRESS = "American Express"
    DISCOVER = "Discover"
    JCB = "JCB"
    DINERS_CLUB = "Diners Club"
    MAESTRO = "Maestro"
    UNIONPAY = "UnionPay"
    TARJETA_NARANJA = "Tarjeta Naranja"


@dataclass(frozen=True)
class ProviderShape:
    """Allowed number lengths and leading-digit pattern of one provider."""

    lengths: frozenset[int]
    prefix: re.Pattern

    def matches(self, number: str) -> bool:
        return len(number) in self.lengths and self.prefix.match(number) is not None


def _shape(lengths: Any, prefix: str) -> ProviderShape:
    return ProviderShape(frozenset(lengths), re.compile(prefix))


PROVIDER_SHAPES: dict[CardProvider, ProviderShape] = {
    CardProvider.VISA: _shape({13, 16}, r"4"),
    CardProvider.MASTERCARD: _shape({16}, r"5[1-5]|2[2-7]"),
    CardProvider.AMERICAN_EXPRESS: _shape({15}, r"3[47]"),
    CardProvider.DISCOVER: _shape({16}, r"6011|622(1[2-9]{2}|[2-8][0-9]{2}|9[0-2][0-5])|64[4-9]|65"),
    CardProvider.JCB: _shape({16}, r"35(2[89]|[3-8][0-9])"),
    CardProvider.DINERS_CLUB: _shape({14}, r"3(0[0-5]|[68])"),
    CardProvider.MAESTRO: _shape(range(12, 20), r"5[06-8]|6"),
    CardProvider.UNIONPAY: _shape(range(16, 20), r"62"),
    CardProvider.TARJETA_NARANJA: _shape({16}, r"5895|546553"),
}


def luhn_checksum(digits: str) -> bool:
    """Luhn mod-10 check. Empty or non-digit input fails."""
    if not isinstance(digits, str) or not digits or not (digits.isascii() and digits.isdigit()):
        return False
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def as_provider(provider: CardProvider | str | None) -> CardProvider | None:
    """Resolve a provider by enum member, display value or member name."""
    if provider is None or isinstance(provider, CardProvider):
        return provider
    try:
        return CardProvider(provider)
    except ValueError:
        return CardProvider.__members__.get(str(provider).upper())


def is_card_number_valid(card_number: str) -> bool:
    return luhn_checksum(card_number)


def is_provider_valid(card_number: str, provider: CardProvider | str) -> bool:
    """True when the number has the length and prefix of ``provider``; unknown providers fail."""
    resolved = as_provider(provider)
    if resolved is None or not isinstance(card_number, str):
        return False
    return PROVIDER_SHAPES[resolved].matches(card_number)


def is_expiration_valid(expiration: str, today: date | None = None) -> bool:
    """True for a well-formed ``MM/YY`` not before the current month.

    The two-digit year is compared directly with ``today.year % 100``.
    """
    parsed = parse_expiration(expiration)
    if parsed is None:
        return False
    month, year = parsed
    today = today or settings.today()
    current_year = today.year % 100
    return year > current_year or (year == current_year and month >= today.month)


def is_credit_card_valid(card_number: str, provider: CardProvider | str,
                         expiration_date: str, today: date | None = None) -> bool:
    return (
        is_card_number_valid(card_number)
        and is_provider_valid(card_number, provider)
        and is_expiration_valid(expiration_date, today)
    )


@dataclass(frozen=True)
class CardDetails:
    card_number: str
    provider: CardProvider | str | None = None
    expiration_date: str | None = None


def as_card_details(card: Any, provider: CardProvider | str | None = None,
                    expiration_date: str | None = None) -> CardDetails:
    """Normalize a string, mapping or ``CardDetails`` input.

    Explicit ``provider``/``expiration_date`` arguments take precedence over
    values carried by the input.
    """
    if isinstance(card, CardDetails):
        details = card
    elif isinstance(card, Mapping):
        details = CardDetails(card.get("card_number"), card.get("provider"), card.get("expiration_date"))
    else:
        details = CardDetails(str(card))
    return CardDetails(
        details.card_number if details.card_number is not None else "",
        provider if provider is not None else details.provider,
        expiration_date if expiration_date is not None else details.expiration_date,
    )


class CardValidator(BaseValidator):
    """Validate card numbers, optionally against a provider and an expiration date.

    Custom rules added with ``add_rule`` receive the card number string.

    Example:
        ```python
        cards = CardValidator()
        cards.get_errors(CardDetails("4532015112830366", CardProvider.MASTERCARD, "01/20"))
        # {'number': 'Invalid card number for provider MasterCard',
        #  'expiration_date': 'Invalid expiration date'}
        ```
    """

    kind = ValidatorKind.CARD

    def get_errors(self, card: Any, provider: CardProvider | str | None = None,
                   expiration_date: str | None = None) -> dict[str, Any]:
        """Structured errors keyed by ``number``, ``expiration_date`` and ``messages``.

        A provider mismatch replaces the checksum message under ``number``.
        """
        if card is None:
            null_errors = check_null(self.nullability, card, self.name)
            return {NOT_NULL_KEY: null_errors} if null_errors else {}
        details = as_card_details(card, provider, expiration_date)
        errors: dict[str, Any] = {}
        if not luhn_checksum(details.card_number):
            errors["number"] = card_messages.invalid_number
        if details.provider and not is_provider_valid(details.card_number, details.provider):
            errors["number"] = self._provider_message(details.provider)
        if details.expiration_date is not None and not is_expiration_valid(details.expiration_date):
            errors["expiration_date"] = card_messages.invalid_expiration
        custom = collect_failures(self._rules, details.card_number)
        if custom:
            errors["messages"] = custom
        return errors

    def get_error_messages(self, card: Any, provider: CardProvider | str | None = None,
                           expiration_date: str | None = None) -> list[str]:
        """Flat messages: custom rules, then checksum, provider and expiration."""
        null_errors = check_null(self.nullability, card, self.name)
        if null_errors is not None:
            return null_errors
        details = as_card_details(card, provider, expiration_date)
        errors = collect_failures(self._rules, details.card_number)
        if not luhn_checksum(details.card_number):
            errors.append(card_messages.invalid_number)
        if details.provider and not is_provider_valid(details.card_number, details.provider):
            errors.append(self._provider_message(details.provider))
        if details.expiration_date is not None and not is_expiration_valid(details.expiration_date):
            errors.append(card_messages.invalid_expiration)
        return errors

    def validate(self, card: Any, provider: CardProvider | str | None = None,
                 expiration_date: str | None = None) -> None:
        errors = self.get_errors(card, provider, expiration_date)
        if errors:
            if settings.get_settings().log_failures:
                logger.debug(f"Card validation failed for {self.name or 'card'}: {errors}")
            raise CreditCardError(errors, context={"validator": self.name})

    def assert_is_valid(self, card: Any, provider: CardProvider | str | None = None,
                        expiration_date: str | None = None) -> None:
        self.validate(card, provider, expiration_date)

    def is_valid(self, card: Any, provider: CardProvider | str | None = None,
                 expiration_date: str | None = None) -> bool:
        try:
            self.validate(card, provider, expiration_date)
        except ValidationError:
            return False
        return True

    @staticmethod
    def _provider_message(provider: CardProvider | str) -> str:
        resolved = as_provider(provider)
        label = resolved.value if resolved is not None else provider
        return card_messages.invalid_provider.format(provider=label)

    @staticmethod
    def validate_expiration(expiration: str, today: date | None = None) -> None:
        """Raise ValidationError unless ``expiration`` is a current or future ``MM/YY``."""
        if not is_expiration_valid(expiration, today):
            raise ValidationError(
                build_error_message("Expiration"),
                [card_messages.invalid_expiration],
                context={"expiration": expiration},
            )
