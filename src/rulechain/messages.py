"""Fixed message catalogs used by the validators."""

from types import SimpleNamespace

messages = SimpleNamespace(
    is_url="the value is not a valid url",
    is_jwt="the value is not a valid JWT",
    is_ip="the value is not a valid IP address",
    not_empty="the value cannot be empty",
    not_blank="the value cannot be blank",
    is_email="the value is not a valid email",
    max_length="the value exceeds the maximum length",
    only_numbers="the value must contain only numbers",
    is_iso8601="the value is not a valid ISO8601 date",
    no_numbers="the value must not contain any numbers",
    is_btc_address="the value is not a valid BTC address",
    is_eth_address="the value is not a valid ETH address",
    has_number="the value must contain at least one number",
    min_length="the value does not meet the minimum length",
    fixed_length="the value does not meet the fixed length",
    only_characters="the value must contain only characters",
    max_length_smaller_than_one="max length cannot be less than 1",
    min_length_smaller_than_zero="min length cannot be less than 0",
    fixed_length_smaller_than_one="fixed length cannot be less than 1",
    custom_rule="the value does not meet the requirements.",
    default_error="the input does not meet the requirements.",
    has_uppercase="the value must contain at least one uppercase letter",
    has_lowercase="the value must contain at least one lowercase letter",
    no_whitespaces="the value must not contain any whitespace characters",
    min_length_greater_than_max="min length cannot be greater than max length",
    max_length_smaller_than_min="max length cannot be smaller than min length",
    no_special_characters="the value must not contain any special characters",
    no_repeated_characters="the value must not contain any repeated characters",
    has_special_character="the value must contain at least one special character",
)

number_messages = SimpleNamespace(
    is_positive="the value must be positive",
    is_negative="the value must be negative",
    max="the value exceeds the maximum value",
    is_non_negative="the value must be non-negative",
    min="the value does not meet the minimum value",
    default_error="the number is not valid",
    min_greater_than_max="min cannot be greater than max",
    max_smaller_than_min="max cannot be smaller than min",
    positive_and_negative="Cannot use is_positive() and is_negative() together",
    negative_and_non_negative="Cannot use is_negative() and is_non_negative() together",
    negative_and_positive_or_non_negative=(
        "Cannot use is_negative() and is_positive() or is_non_negative() together"
    ),
)

array_messages = SimpleNamespace(
    not_empty="the array cannot be empty",
    max="the array exceeds the maximum length",
    default_error="the array is not valid",
    min="the array does not meet the minimum length",
    no_duplicates="the array must not contain any duplicates",
    min_smaller_than_zero="min length cannot be less than 0",
    max_smaller_than_zero="max length cannot be less than 0",
)

common_messages = SimpleNamespace(
    not_null="the value cannot be null or undefined",
    max_smaller_than_min="max cannot be smaller than min",
    min_greater_than_max="min cannot be greater than max",
    null_input="input cannot be null or undefined",
    frozen="the validator is frozen and cannot be configured",
)

base_messages = SimpleNamespace(
    nullable_and_not_null="Cannot use not_null() and is_nullable() together",
)

card_messages = SimpleNamespace(
    invalid_number="Invalid card number",
    invalid_provider="Invalid card number for provider {provider}",
    invalid_expiration="Invalid expiration date",
)


def build_error_message(name: str | None) -> str:
    """Headline for a raised ValidationError."""
    if name:
        return f"the field '{name}' does not meet the requirements."
    return messages.default_error
