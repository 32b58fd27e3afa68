"""Scalar classification for tokens read from block-style text."""

import re
from typing import Optional
from .models import Value, Null, Bool, Number, Str, Sequence, Mapping


INTEGER_PATTERN = re.compile(r"^-?\d+$", re.ASCII)
DECIMAL_PATTERN = re.compile(r"^-?\d+\.\d+$", re.ASCII)

NULL_TOKENS = frozenset(["", "null", "~"])
QUOTE_CHARS = ('"', "'")


class ScalarClassifier:
    """
    Decides which Value a trimmed text token denotes.

    Rules are tried in a fixed order and the first match wins:

    1. empty, ``null`` or ``~`` is Null
    2. ``true`` / ``false`` are Bool
    3. an optionally signed run of digits is an integer Number
    4. digits, a dot and digits is a decimal Number
    5. a token wrapped in matching ``"`` or ``'`` is a Str without the quotes
    6. ``[]`` and ``{}`` are an empty Sequence and an empty Mapping
    7. anything else is a Str, verbatim

    Classification never fails.
    """

    def classify(self, token: str) -> Value:
        """
        Classify a token.

        Args:
            token: Token text; surrounding whitespace is ignored

        Returns:
            Value denoted by the token
        """
        token = token.strip()

        if token in NULL_TOKENS:
            return Null()

        if token == "true":
            return Bool(True)
        if token == "false":
            return Bool(False)

        if INTEGER_PATTERN.match(token) or DECIMAL_PATTERN.match(token):
            number = self._to_number(token)
            if number is not None:
                return number

        if self.is_quoted(token):
            return Str(token[1:-1])

        if token == "[]":
            return Sequence()
        if token == "{}":
            return Mapping()

        return Str(token)

    @staticmethod
    def _to_number(token: str) -> Optional[Number]:
        # Digit runs past the int conversion limit or decimals that overflow
        # a float stay strings
        try:
            number = int(token) if INTEGER_PATTERN.match(token) else float(token)
            return Number(number)
        except ValueError:
            return None

    @staticmethod
    def is_quoted(token: str) -> bool:
        """Check whether a token starts and ends with the same quote character."""
        return len(token) >= 2 and token[0] in QUOTE_CHARS and token[0] == token[-1]
