"""Tests for scalar classifier."""

import pytest
from yaml_transcoder.scalar_classifier import ScalarClassifier
from yaml_transcoder.models import Null, Bool, Number, Str, Sequence, Mapping


class TestScalarClassifier:
    """Tests for ScalarClassifier class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = ScalarClassifier()

    @pytest.mark.parametrize("token", ["", "null", "~", "   "])
    def test_null_tokens(self, token):
        """Test tokens that denote null."""
        assert self.classifier.classify(token) == Null()

    def test_booleans(self):
        """Test exact boolean literals."""
        assert self.classifier.classify("true") == Bool(True)
        assert self.classifier.classify("false") == Bool(False)

    def test_boolean_literals_are_case_sensitive(self):
        """Test that only lowercase literals are booleans."""
        assert self.classifier.classify("True") == Str("True")
        assert self.classifier.classify("yes") == Str("yes")

    def test_integers(self):
        """Test integer-looking tokens."""
        value = self.classifier.classify("42")
        assert value == Number(42)
        assert isinstance(value.value, int)
        assert self.classifier.classify("-7") == Number(-7)

    def test_large_integer_is_exact(self):
        """Test that large integers keep every digit."""
        value = self.classifier.classify("123456789012345678901234567890")
        assert value.value == 123456789012345678901234567890

    def test_decimals(self):
        """Test decimal-looking tokens."""
        value = self.classifier.classify("3.14")
        assert value == Number(3.14)
        assert isinstance(value.value, float)
        assert self.classifier.classify("-0.5") == Number(-0.5)

    @pytest.mark.parametrize("token", ["1e5", ".5", "5.", "+1", "1_000", "0x1F"])
    def test_other_numeric_forms_are_strings(self, token):
        """Test that forms outside the two number patterns stay strings."""
        assert self.classifier.classify(token) == Str(token)

    def test_double_quoted(self):
        """Test that double quotes are stripped."""
        assert self.classifier.classify('"hello world"') == Str("hello world")

    def test_single_quoted(self):
        """Test that single quotes are stripped."""
        assert self.classifier.classify("'hello'") == Str("hello")

    def test_quoted_literals_stay_strings(self):
        """Test that quoting keeps literals from being classified."""
        assert self.classifier.classify('"true"') == Str("true")
        assert self.classifier.classify("'42'") == Str("42")
        assert self.classifier.classify('""') == Str("")

    def test_no_escape_decoding(self):
        """Test that escapes inside quotes are kept as written."""
        assert self.classifier.classify('"a\\nb"') == Str("a\\nb")

    def test_mismatched_quotes_are_verbatim(self):
        """Test that mismatched quotes are not stripped."""
        assert self.classifier.classify("\"hello'") == Str("\"hello'")
        assert self.classifier.classify('"') == Str('"')

    def test_empty_containers(self):
        """Test empty flow collections."""
        assert self.classifier.classify("[]") == Sequence()
        assert self.classifier.classify("{}") == Mapping()

    def test_bare_strings(self):
        """Test fallback to verbatim strings."""
        assert self.classifier.classify("hello") == Str("hello")
        assert self.classifier.classify("[1, 2]") == Str("[1, 2]")
        assert self.classifier.classify("http://x.com") == Str("http://x.com")

    def test_rule_order_null_before_string(self):
        """Test that the null rule wins over the string fallback."""
        assert self.classifier.classify("~") == Null()

    def test_surrounding_whitespace_ignored(self):
        """Test that tokens are trimmed before classification."""
        assert self.classifier.classify("  12  ") == Number(12)

    def test_is_quoted(self):
        """Test quote detection."""
        assert ScalarClassifier.is_quoted('"x"')
        assert ScalarClassifier.is_quoted("''")
        assert not ScalarClassifier.is_quoted("'x\"")
        assert not ScalarClassifier.is_quoted("'")

    def test_overflowing_decimal_stays_string(self):
        """Test that a decimal too large for a float is kept as text."""
        token = "9" * 400 + ".5"
        assert self.classifier.classify(token) == Str(token)
