"""Tests for CardValidator and the card helper functions."""

from datetime import date

import pytest

from rulechain import (
    CardDetails,
    CardProvider,
    CardValidator,
    ContractViolationError,
    CreditCardError,
    ValidationError,
    is_credit_card_valid,
    is_expiration_valid,
    is_provider_valid,
    luhn_checksum,
)
from rulechain.cards import PROVIDER_SHAPES, as_card_details, as_provider
from rulechain.messages import card_messages, common_messages

VALID_VISA = "4532015112830366"
INVALID_VISA = "4532015112830367"


class TestLuhn:
    """Test the Luhn checksum."""

    def test_valid_number(self):
        """Test a number with a correct check digit."""
        assert luhn_checksum(VALID_VISA)

    def test_invalid_number(self):
        """Test a number with a wrong check digit."""
        assert not luhn_checksum(INVALID_VISA)

    @pytest.mark.parametrize("value", ["", "4532 0151 1283 0366", "abcd", "４５３２"])
    def test_non_digits_fail(self, value):
        """Test empty and non-digit input fails."""
        assert not luhn_checksum(value)


class TestProviders:
    """Test provider number shapes."""

    @pytest.mark.parametrize(
        "number,provider",
        [
            ("4532015112830366", CardProvider.VISA),
            ("4222222222222", CardProvider.VISA),
            ("5555555555554444", CardProvider.MASTERCARD),
            ("2221000000000009", CardProvider.MASTERCARD),
            ("378282246310005", CardProvider.AMERICAN_EXPRESS),
            ("6011111111111117", CardProvider.DISCOVER),
            ("6221260000000000", CardProvider.DISCOVER),
            ("3530111333300000", CardProvider.JCB),
            ("30569309025904", CardProvider.DINERS_CLUB),
            ("6759649826438453", CardProvider.MAESTRO),
            ("6200000000000005", CardProvider.UNIONPAY),
            ("5895000000000000", CardProvider.TARJETA_NARANJA),
        ],
    )
    def test_matching_shapes(self, number, provider):
        """Test numbers matching their provider's length and prefix."""
        assert is_provider_valid(number, provider)

    def test_visa_number_not_mastercard(self):
        """Test a Visa number fails the MasterCard shape."""
        assert not is_provider_valid(VALID_VISA, CardProvider.MASTERCARD)

    def test_wrong_length(self):
        """Test a right prefix with the wrong length fails."""
        assert not is_provider_valid("453201511283", CardProvider.VISA)

    def test_every_provider_has_shape(self):
        """Test the shape table covers every provider."""
        assert set(PROVIDER_SHAPES) == set(CardProvider)

    def test_provider_lookup(self):
        """Test providers resolve by value or member name."""
        assert as_provider("Visa") is CardProvider.VISA
        assert as_provider("american_express") is CardProvider.AMERICAN_EXPRESS
        assert as_provider("Nope") is None
        assert not is_provider_valid(VALID_VISA, "Nope")


class TestExpiration:
    """Test expiration parsing against the pinned reference date (2024-06-01)."""

    def test_past_year_raises(self):
        """Test an expired year raises."""
        with pytest.raises(ValidationError) as exc_info:
            CardValidator.validate_expiration("04/22")
        assert exc_info.value.errors == [card_messages.invalid_expiration]

    def test_future_does_not_raise(self):
        """Test a future date passes."""
        assert CardValidator.validate_expiration("04/25") is None

    def test_current_month_valid(self):
        """Test the current month is still valid."""
        assert is_expiration_valid("06/24")
        assert not is_expiration_valid("05/24")

    @pytest.mark.parametrize("value", ["0423", "AA/25", "00/25", "13/25", "04/2025", "", None])
    def test_malformed_raises(self, value):
        """Test malformed input raises."""
        with pytest.raises(ValidationError):
            CardValidator.validate_expiration(value)

    def test_explicit_today(self):
        """Test an explicit reference date overrides the configured one."""
        assert is_expiration_valid("04/22", today=date(2022, 4, 30))
        with pytest.raises(ValidationError):
            CardValidator.validate_expiration("04/25", today=date(2025, 5, 1))


class TestCardValidator:
    """Test CardValidator terminal operations."""

    def test_valid_number(self):
        """Test a valid number with no provider."""
        validator = CardValidator()
        assert validator.is_valid(VALID_VISA)
        assert validator.get_errors(VALID_VISA) == {}
        assert validator.get_error_messages(VALID_VISA) == []

    def test_invalid_checksum(self):
        """Test the checksum failure under number."""
        validator = CardValidator()
        assert validator.get_errors(INVALID_VISA) == {"number": card_messages.invalid_number}
        assert not validator.is_valid(INVALID_VISA)

    def test_provider_mismatch(self):
        """Test the provider-specific message."""
        errors = CardValidator().get_errors(VALID_VISA, CardProvider.MASTERCARD)
        assert errors == {"number": "Invalid card number for provider MasterCard"}

    def test_provider_overwrites_checksum(self):
        """Test the provider message replaces the checksum message under number."""
        validator = CardValidator()
        details = CardDetails(INVALID_VISA, CardProvider.MASTERCARD)
        assert validator.get_errors(details) == {"number": "Invalid card number for provider MasterCard"}
        assert validator.get_error_messages(details) == [
            card_messages.invalid_number,
            "Invalid card number for provider MasterCard",
        ]

    def test_expiration_in_details(self):
        """Test expiration failures are keyed separately."""
        errors = CardValidator().get_errors(CardDetails(VALID_VISA, CardProvider.VISA, "01/20"))
        assert errors == {"expiration_date": card_messages.invalid_expiration}

    def test_mapping_input(self):
        """Test snake_case mapping input."""
        card = {"card_number": VALID_VISA, "provider": "Visa", "expiration_date": "12/30"}
        assert CardValidator().is_valid(card)

    def test_custom_rules_first_in_flat_list(self):
        """Test custom rule failures lead the flat list and sit under messages."""
        validator = CardValidator().add_rule(lambda number: number.startswith("5"), "must be a 5-series card")
        details = CardDetails(INVALID_VISA, expiration_date="01/20")
        assert validator.get_error_messages(details) == [
            "must be a 5-series card",
            card_messages.invalid_number,
            card_messages.invalid_expiration,
        ]
        assert validator.get_errors(details) == {
            "number": card_messages.invalid_number,
            "expiration_date": card_messages.invalid_expiration,
            "messages": ["must be a 5-series card"],
        }

    def test_validate_raises_credit_card_error(self):
        """Test validate raises CreditCardError with the structured errors."""
        with pytest.raises(CreditCardError) as exc_info:
            CardValidator().validate(VALID_VISA, CardProvider.AMERICAN_EXPRESS)
        assert exc_info.value.errors == {"number": "Invalid card number for provider American Express"}

    def test_assert_is_valid(self):
        """Test assert_is_valid passes and raises like validate."""
        validator = CardValidator()
        assert validator.assert_is_valid(VALID_VISA, "Visa") is None
        with pytest.raises(CreditCardError):
            validator.assert_is_valid(INVALID_VISA)

    def test_null_handling(self):
        """Test the nullability contract applies to cards."""
        assert CardValidator().is_nullable().is_valid(None)
        assert CardValidator().not_null().get_error_messages(None) == [common_messages.not_null]
        assert CardValidator().not_null().get_errors(None) == {"not_null": [common_messages.not_null]}
        with pytest.raises(ContractViolationError):
            CardValidator().is_valid(None)


class TestHelpers:
    """Test the card helper functions."""

    def test_is_credit_card_valid(self):
        """Test the combined check."""
        assert is_credit_card_valid(VALID_VISA, CardProvider.VISA, "12/26")
        assert not is_credit_card_valid(VALID_VISA, CardProvider.VISA, "12/23")
        assert not is_credit_card_valid(INVALID_VISA, CardProvider.VISA, "12/26")

    def test_as_card_details_overrides(self):
        """Test explicit arguments override values carried by the input."""
        details = as_card_details(CardDetails(VALID_VISA, "Visa"), provider="JCB")
        assert details == CardDetails(VALID_VISA, "JCB", None)
        assert as_card_details({}).card_number == ""
