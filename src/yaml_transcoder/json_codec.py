"""JSON text codec backed by the standard json module."""

import json
import logging
from typing import NoReturn, Optional
from .types import ConversionError, ErrorType
from .models import Value, from_python


class JSONCodec:
    """
    Converts between JSON text and value trees.

    Decoding keeps object key order and integer precision. Non-finite
    numbers (``NaN``, ``Infinity`` and literals that overflow a float) are
    rejected because JSON output could not represent them.
    """

    def __init__(self, indent: int = 2, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON codec.

        Args:
            indent: Indentation used when encoding JSON text
            logger: Optional logger instance
        """
        if indent < 0:
            raise ValueError(f"indent must be non-negative, got {indent}")
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, json_string: str) -> Value:
        """
        Decode JSON text into a value tree.

        Args:
            json_string: JSON text to decode

        Returns:
            Value tree for the document

        Raises:
            ConversionError: If the text is not valid JSON or holds values
                that have no Value counterpart
        """
        try:
            data = json.loads(json_string, parse_constant=self._reject_constant)
        except json.JSONDecodeError as e:
            # The decoder's own message carries line, column and char position
            raise ConversionError(str(e), ErrorType.SYNTAX) from e

        try:
            value = from_python(data)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"Unsupported JSON value: {e}", ErrorType.STRUCTURE) from e

        self.logger.debug(f"Decoded JSON document with a {value.kind.value} root")
        return value

    def encode(self, value: Value) -> str:
        """
        Encode a value tree as pretty-printed JSON text.

        Args:
            value: Value tree to encode

        Returns:
            JSON text; an indent of 0 gives compact single-line output
        """
        return json.dumps(value.to_python(), indent=self.indent or None, ensure_ascii=False)

    @staticmethod
    def _reject_constant(name: str) -> NoReturn:
        raise ConversionError(
            f"Unsupported JSON value: {name} is not a finite number",
            ErrorType.STRUCTURE
        )
