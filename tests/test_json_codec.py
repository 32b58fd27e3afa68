"""Tests for JSON codec."""

import pytest
from yaml_transcoder.json_codec import JSONCodec
from yaml_transcoder.models import Null, Bool, Number, Str, Sequence, Mapping, from_python
from yaml_transcoder.types import ConversionError, ErrorType


class TestJSONCodec:
    """Tests for JSONCodec class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = JSONCodec()

    def test_decode_object(self):
        """Test decoding a flat object."""
        value = self.codec.decode('{"name": "Ada", "active": true, "age": null}')

        assert value == Mapping({"name": Str("Ada"), "active": Bool(True), "age": Null()})

    def test_decode_keeps_key_order(self):
        """Test that object key order is kept."""
        value = self.codec.decode('{"b": 1, "a": 2}')

        assert [key for key, _ in value.items()] == ["b", "a"]

    def test_decode_scalar_root(self):
        """Test documents whose root is a scalar."""
        assert self.codec.decode("42") == Number(42)
        assert self.codec.decode('"text"') == Str("text")

    def test_decode_large_integer_is_exact(self):
        """Test that integers beyond 64 bits keep every digit."""
        value = self.codec.decode("[123456789012345678901234567890]")

        assert value.items[0].value == 123456789012345678901234567890

    def test_decode_syntax_error_keeps_decoder_message(self):
        """Test that decoder errors keep their position information."""
        with pytest.raises(ConversionError) as exc_info:
            self.codec.decode('{"a":}')

        assert exc_info.value.error_type == ErrorType.SYNTAX
        assert "Expecting value" in str(exc_info.value)
        assert "line 1 column 6" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"x": -Infinity}'])
    def test_decode_rejects_non_finite_constants(self, text):
        """Test that NaN and Infinity literals are rejected."""
        with pytest.raises(ConversionError, match="not a finite number") as exc_info:
            self.codec.decode(text)

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_decode_rejects_overflowing_float(self):
        """Test that a literal too large for a float is rejected."""
        with pytest.raises(ConversionError, match="Unsupported JSON value") as exc_info:
            self.codec.decode("[1e400]")

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_encode_pretty(self):
        """Test the default two-space output."""
        output = self.codec.encode(from_python({"a": [1, 2]}))

        assert output == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_encode_compact(self):
        """Test that an indent of 0 gives single-line output."""
        codec = JSONCodec(indent=0)

        assert codec.encode(from_python({"a": [1, 2]})) == '{"a": [1, 2]}'

    def test_encode_non_ascii(self):
        """Test that non-ASCII text is written as-is."""
        assert self.codec.encode(Str("héllo")) == '"héllo"'

    def test_encode_empty_containers(self):
        """Test encoding of empty containers."""
        assert self.codec.encode(Sequence()) == "[]"
        assert self.codec.encode(Mapping()) == "{}"

    def test_encode_decimal(self):
        """Test that decimals keep their fractional part."""
        assert self.codec.encode(Number(2.5)) == "2.5"

    def test_negative_indent(self):
        """Test that a negative indent is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            JSONCodec(indent=-1)
