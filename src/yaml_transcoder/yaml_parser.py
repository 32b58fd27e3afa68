"""Line-oriented parser for block-style YAML text."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Type
from .types import ParserInterface, ConversionError, ErrorType
from .models import Value, Container, Null, Sequence, Mapping, ParseFrame, FrameStack
from .scalar_classifier import ScalarClassifier


COMMENT_MARKER = "#"
SEQUENCE_DASH = "-"


@dataclass
class _ParseState:
    """Per-call parser state."""
    stack: FrameStack = field(default_factory=FrameStack)
    warnings: List[str] = field(default_factory=list)
    lines_read: int = 0
    comments_dropped: int = 0


class YamlParser(ParserInterface):
    """
    Reconstructs a Value tree from indented block-style text.

    Lines are read top to bottom. Each one is classified as blank, comment,
    sequence item or mapping entry, and its leading whitespace decides which
    open container it belongs to. Open containers are tracked on a
    FrameStack.

    By default the parser is permissive: lines it cannot place are skipped
    and conflicting structure is repaired on a best-effort basis. With
    ``strict=True`` those cases raise ConversionError instead.
    """

    def __init__(self, strict: bool = False,
                 classifier: Optional[ScalarClassifier] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the parser.

        Args:
            strict: Raise on malformed lines instead of skipping them
            classifier: Optional ScalarClassifier instance
            logger: Optional logger instance
        """
        self.strict = strict
        self.classifier = classifier or ScalarClassifier()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> Value:
        """
        Parse block-style text into a value tree.

        Args:
            text: Input text

        Returns:
            Document root, or the scalar value of the whole input when no
            line opened a container

        Raises:
            ConversionError: Only in strict mode, for malformed input
        """
        value, _ = self.parse_with_warnings(text)
        return value

    def parse_with_warnings(self, text: str,
                            report_comments: bool = False) -> Tuple[Value, List[str]]:
        """
        Parse text and report lossy repairs made along the way.

        Args:
            text: Input text
            report_comments: Add a warning counting the comments that the
                value tree cannot keep

        Returns:
            Tuple of (document value, warning messages)
        """
        state = _ParseState()

        for line_number, line in enumerate(text.split("\n"), start=1):
            content = line.strip()
            if not content:
                continue
            if content.startswith(COMMENT_MARKER):
                state.comments_dropped += 1
                continue

            leading = line[:len(line) - len(line.lstrip())]
            if "\t" in leading:
                self._reject(line_number, ErrorType.SYNTAX, "Tab character used for indentation")

            state.lines_read += 1
            self._read_line(state, len(leading), content, line_number)

        if report_comments and state.comments_dropped:
            self._warn(state, f"{state.comments_dropped} comment(s) dropped; comments are not kept in the output")

        root = state.stack.root.container
        if root is None:
            self.logger.debug("No container found, reading input as a single scalar")
            return self.classifier.classify(text.strip()), state.warnings

        self.logger.debug(f"Parsed {state.lines_read} lines into a {root.kind.value}")
        return root, state.warnings

    def _read_line(self, state: _ParseState, indent: int, content: str, line_number: int) -> None:
        """Dispatch one line, or the remainder of a sequence item, by its shape."""
        if content == SEQUENCE_DASH or content.startswith(SEQUENCE_DASH + " "):
            self._read_sequence_item(state, indent, content, line_number)
        elif ":" in content:
            self._read_mapping_entry(state, indent, content, line_number)
        else:
            self._skip(line_number, f"Line is neither a sequence item nor a mapping entry: {content!r}")

    def _read_sequence_item(self, state: _ParseState, indent: int, content: str,
                            line_number: int) -> None:
        state.stack.unwind(indent, sequence_item=True)
        frame = state.stack.top

        sequence = self._open_container(state, frame, Sequence, line_number)
        if sequence is None:
            return

        after_dash = content[len(SEQUENCE_DASH):]
        rest = after_dash.strip()
        # Column where the item's own content starts
        column = indent + len(SEQUENCE_DASH) + len(after_dash) - len(after_dash.lstrip())

        if not rest:
            sequence.append(Null())
            state.stack.push(ParseFrame(indent, None, sequence, len(sequence) - 1))
        elif rest == SEQUENCE_DASH or rest.startswith(SEQUENCE_DASH + " "):
            self._open_nested(state, indent, sequence, Sequence())
            self._read_line(state, column, rest, line_number)
        elif self._is_inline_entry(rest):
            self._open_nested(state, indent, sequence, Mapping())
            self._read_line(state, column, rest, line_number)
        else:
            sequence.append(self.classifier.classify(self._strip_comment(state, rest)))

    def _read_mapping_entry(self, state: _ParseState, indent: int, content: str,
                            line_number: int) -> None:
        state.stack.unwind(indent)
        frame = state.stack.top

        mapping = self._open_container(state, frame, Mapping, line_number)
        if mapping is None:
            return

        # Split at the first colon, even inside quotes
        colon_index = content.index(":")
        key = content[:colon_index].strip()
        value_text = self._strip_comment(state, content[colon_index + 1:].strip())

        if key in mapping:
            self._reject(line_number, ErrorType.STRUCTURE, f"Duplicate mapping key {key!r}")

        if value_text:
            mapping.set(key, self.classifier.classify(value_text))
        else:
            # Value follows on deeper lines; stays {} if none do
            placeholder = Mapping()
            mapping.set(key, placeholder)
            state.stack.push(ParseFrame(indent, placeholder, mapping, key))

    def _open_container(self, state: _ParseState, frame: ParseFrame,
                        kind: Type[Container], line_number: int) -> Optional[Container]:
        """
        Return the frame's container as ``kind``, creating it when needed.

        A missing container, or an empty placeholder of the other kind, is
        replaced by a new container stored in the frame's slot. A mapping
        holding entries gives way to a sequence with a warning; a sequence
        holding items never gives way to a mapping and the line is skipped.
        """
        container = frame.container
        if isinstance(container, kind):
            return container

        if container is not None and len(container) > 0:
            where = "document root" if frame.is_root() else f"value of {frame.pending_key!r}"
            message = (f"Expected a {kind.kind.value} for the {where}, "
                       f"found a {container.kind.value}")
            self._reject(line_number, ErrorType.STRUCTURE, message)
            if kind is Mapping:
                self._warn(state, f"Line {line_number}: {message}; line skipped")
                return None
            self._warn(state, f"Line {line_number}: {message}; discarded {len(container)} entries")

        replacement = kind()
        frame.fill(replacement)
        return replacement

    def _open_nested(self, state: _ParseState, indent: int, sequence: Sequence,
                     container: Container) -> None:
        sequence.append(container)
        state.stack.push(ParseFrame(indent, container, sequence, len(sequence) - 1))

    def _is_inline_entry(self, text: str) -> bool:
        """Check whether a sequence item's remainder is a ``key: value`` entry."""
        if self.classifier.is_quoted(text):
            return False
        colon_index = text.find(":")
        if colon_index == -1:
            return False
        return colon_index == len(text) - 1 or text[colon_index + 1].isspace()

    def _strip_comment(self, state: _ParseState, text: str) -> str:
        """Drop a trailing `` # comment`` from an unquoted token."""
        if text.startswith(COMMENT_MARKER):
            state.comments_dropped += 1
            return ""
        if text[:1] in ('"', "'"):
            return text
        for index in range(1, len(text)):
            if text[index] == COMMENT_MARKER and text[index - 1].isspace():
                state.comments_dropped += 1
                return text[:index].rstrip()
        return text

    def _warn(self, state: _ParseState, message: str) -> None:
        self.logger.warning(message)
        state.warnings.append(message)

    def _skip(self, line_number: int, reason: str) -> None:
        self._reject(line_number, ErrorType.SYNTAX, reason)
        self.logger.debug(f"Skipping line {line_number}: {reason}")

    def _reject(self, line_number: int, error_type: ErrorType, message: str) -> None:
        """Raise in strict mode; otherwise do nothing."""
        if self.strict:
            raise ConversionError(message, error_type, location=f"line {line_number}")


def from_yaml_text(text: str, strict: bool = False) -> Value:
    """Parse block-style text into a value tree."""
    return YamlParser(strict).parse(text)
