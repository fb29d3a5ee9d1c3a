"""Tests for the string sanitizers."""

from rulechain import sanitizers


class TestKeepFilters:
    """Test character filters."""

    def test_keep_alphanumeric(self):
        """Test punctuation and spaces are removed."""
        assert sanitizers.keep_alphanumeric("Hello, World! 123") == "HelloWorld123"
        assert sanitizers.keep_alphanumeric("!@#$%^&*()_+=-") == ""
        assert sanitizers.keep_alphanumeric("Ñoño") == "Ñoño"

    def test_keep_only_numbers(self):
        """Test only digits survive."""
        assert sanitizers.keep_only_numbers("Hello, World! 123") == "123"
        assert sanitizers.keep_only_numbers("Hello") == ""

    def test_keep_only_characters(self):
        """Test only letters (including ñ) survive."""
        assert sanitizers.keep_only_characters("Hello, World! 123Ñoño") == "HelloWorldÑoño"
        assert sanitizers.keep_only_characters("1234567890") == ""


class TestCaseConversion:
    """Test camelCase and snake_case conversion."""

    def test_camel_to_snake(self):
        """Test uppercase letters become underscore-prefixed lowercase."""
        assert sanitizers.camel_case_to_snake_case("cardNumberValue") == "card_number_value"

    def test_snake_to_camel(self):
        """Test underscore segments become capitalized."""
        assert sanitizers.snake_case_to_camel_case("expiration_date") == "expirationDate"


class TestNormalizeSpanish:
    """Test accent removal."""

    def test_removes_tildes(self):
        """Test accented vowels and ñ are normalized."""
        assert sanitizers.normalize_spanish_input("aclaración ñuñoÑuño") == "aclaracion nunoNuno"

    def test_plain_input_unchanged(self):
        """Test input without accents is unchanged."""
        assert sanitizers.normalize_spanish_input("Hello, World! 123") == "Hello, World! 123"
