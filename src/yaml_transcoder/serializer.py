"""Block-style YAML serializer for value trees."""

import logging
from typing import List, Optional
from .types import SerializerInterface
from .models import Value, Null, Bool, Number, Str, Sequence, Mapping


MIN_INDENT_WIDTH = 1
MAX_INDENT_WIDTH = 8

SEQUENCE_MARKER = "- "
QUOTE_TRIGGERS = ("\n", ":", "#")


class YamlSerializer(SerializerInterface):
    """
    Renders a Value tree as indented block-style text.

    Every nesting level adds one fixed indentation unit. Containers are
    written one entry per line and only appear inline when empty, as
    ``[]`` or ``{}``.
    """

    def __init__(self, indent_width: int = 2, logger: Optional[logging.Logger] = None):
        """
        Initialize the serializer.

        Args:
            indent_width: Columns per nesting level (1-8)
            logger: Optional logger instance

        Raises:
            ValueError: If indent_width is out of range
        """
        if not MIN_INDENT_WIDTH <= indent_width <= MAX_INDENT_WIDTH:
            raise ValueError(
                f"indent_width must be between {MIN_INDENT_WIDTH} and {MAX_INDENT_WIDTH}, "
                f"got {indent_width}"
            )
        self.indent_width = indent_width
        self.logger = logger or logging.getLogger(__name__)

    def serialize(self, value: Value) -> str:
        """
        Serialize a value tree.

        Args:
            value: Root of the value tree

        Returns:
            Block-style text without a trailing newline
        """
        lines = self._render(value, 0)
        self.logger.debug(f"Serialized {value.kind.value} into {len(lines)} lines")
        return "\n".join(lines)

    def render_scalar(self, value: Value) -> str:
        """
        Render a scalar, or an empty container, as a single token.

        Args:
            value: Scalar value or empty container

        Returns:
            Inline text for the value
        """
        if isinstance(value, Null):
            return "null"
        elif isinstance(value, Bool):
            return "true" if value.value else "false"
        elif isinstance(value, Number):
            return value.to_text()
        elif isinstance(value, Str):
            return self.quote_string(value.value)
        elif isinstance(value, Sequence) and len(value) == 0:
            return "[]"
        elif isinstance(value, Mapping) and len(value) == 0:
            return "{}"
        raise TypeError(f"Cannot render {type(value).__name__} inline")

    @staticmethod
    def quote_string(text: str) -> str:
        """
        Quote a string when it would otherwise read as an entry or a comment.

        Strings holding a newline, a colon or a ``#``, and strings that read as
        a sequence item (``-`` or ``- x``), are wrapped in double quotes with
        ``"`` and newlines escaped; anything else is verbatim.
        """
        stripped = text.strip()
        looks_like_item = stripped == SEQUENCE_MARKER.strip() or stripped.startswith(SEQUENCE_MARKER)
        if looks_like_item or any(trigger in text for trigger in QUOTE_TRIGGERS):
            escaped = text.replace('"', '\\"').replace("\n", "\\n")
            return f'"{escaped}"'
        return text

    def _render(self, value: Value, depth: int) -> List[str]:
        """Render a value at the given depth as a list of lines."""
        if isinstance(value, Sequence) and len(value) > 0:
            return self._render_sequence(value, depth)
        elif isinstance(value, Mapping) and len(value) > 0:
            return self._render_mapping(value, depth)
        return [self.render_scalar(value)]

    def _render_sequence(self, sequence: Sequence, depth: int) -> List[str]:
        pad = self._pad(depth)
        continuation = pad + " " * len(SEQUENCE_MARKER)
        lines = []

        for item in sequence:
            if self._is_block(item):
                # First line follows the dash, the rest lines up under it
                item_lines = self._render(item, 0)
                lines.append(f"{pad}{SEQUENCE_MARKER}{item_lines[0]}")
                lines.extend(continuation + line for line in item_lines[1:])
            else:
                lines.append(f"{pad}{SEQUENCE_MARKER}{self.render_scalar(item)}")

        return lines

    def _render_mapping(self, mapping: Mapping, depth: int) -> List[str]:
        pad = self._pad(depth)
        lines = []

        for key, value in mapping.items():
            if self._is_block(value):
                lines.append(f"{pad}{key}:")
                lines.extend(self._render(value, depth + 1))
            else:
                lines.append(f"{pad}{key}: {self.render_scalar(value)}")

        return lines

    @staticmethod
    def _is_block(value: Value) -> bool:
        return value.is_container() and len(value) > 0

    def _pad(self, depth: int) -> str:
        return " " * (self.indent_width * depth)


def to_yaml_text(value: Value, indent_width: int = 2) -> str:
    """Render a value tree as block-style text."""
    return YamlSerializer(indent_width).serialize(value)
