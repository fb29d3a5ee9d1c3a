"""String sanitizers. Each takes a string and returns a cleaned copy."""

import re

NON_ALPHANUMERIC_REGEX = re.compile(r"[^a-zA-Z0-9ñÑ]")
NON_DIGIT_REGEX = re.compile(r"[^0-9]")
NON_LETTER_REGEX = re.compile(r"[^a-zA-ZñÑ]")
UPPERCASE_REGEX = re.compile(r"[A-Z]")
SNAKE_SEGMENT_REGEX = re.compile(r"_([a-z])")

TILDES = str.maketrans("áéíóúÁÉÍÓÚñÑ", "aeiouAEIOUnN")


def keep_alphanumeric(value: str) -> str:
    """Keep ASCII letters, digits and ñ/Ñ."""
    return NON_ALPHANUMERIC_REGEX.sub("", value)


def keep_only_numbers(value: str) -> str:
    return NON_DIGIT_REGEX.sub("", value)


def keep_only_characters(value: str) -> str:
    return NON_LETTER_REGEX.sub("", value)


def camel_case_to_snake_case(value: str) -> str:
    """``cardNumber`` -> ``card_number``."""
    return UPPERCASE_REGEX.sub(lambda match: f"_{match.group(0).lower()}", value)


def snake_case_to_camel_case(value: str) -> str:
    """``card_number`` -> ``cardNumber``."""
    return SNAKE_SEGMENT_REGEX.sub(lambda match: match.group(1).upper(), value)


def normalize_spanish_input(value: str) -> str:
    """Strip Spanish accents and map ñ/Ñ to n/N."""
    return value.translate(TILDES)
