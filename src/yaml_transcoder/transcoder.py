"""Main JSON/YAML transcoder implementation."""

import logging
from contextlib import nullcontext
from typing import Callable, Dict, List, Optional, Tuple, Union
from .types import (
    TranscoderInterface,
    ConversionResult,
    ConversionError,
    Direction,
    ErrorType
)
from .json_codec import JSONCodec
from .scalar_classifier import ScalarClassifier
from .serializer import YamlSerializer
from .yaml_parser import YamlParser
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JsonYamlTranscoder(TranscoderInterface):
    """
    Main implementation of the transcoder interface.

    Converts JSON text to block-style YAML text and back, and reformats
    YAML text to a uniform indentation. Every call is synchronous and
    independent; failures come back as an unsuccessful ConversionResult
    instead of an exception.
    """

    def __init__(self, indent_width: int = 2,
                 json_indent: int = 2,
                 strict: bool = False,
                 enable_profiling: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the transcoder.

        Args:
            indent_width: Columns per nesting level in YAML output (1-8)
            json_indent: Indentation of JSON output (0 for compact output)
            strict: Raise conversion errors for malformed YAML instead of
                producing a best-effort result
            enable_profiling: Record performance metrics for each conversion
            logger: Optional logger instance

        Raises:
            ValueError: If indent_width or json_indent is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

        indent_validation = self.error_handler.validate_indent_parameter(indent_width)
        if not indent_validation.is_valid:
            raise ValueError("; ".join(error.message for error in indent_validation.errors))

        self.indent_width = indent_width
        self.strict = strict

        self.classifier = ScalarClassifier()
        self.serializer = YamlSerializer(indent_width, self.logger)
        self.parser = YamlParser(strict, self.classifier, self.logger)
        self.json_codec = JSONCodec(json_indent, self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

        self._handlers: Dict[Direction, Callable[[str], Tuple[str, List[str]]]] = {
            Direction.JSON_TO_YAML: self._json_to_yaml,
            Direction.YAML_TO_JSON: self._yaml_to_json,
            Direction.YAML_TO_YAML: self._reformat_yaml,
        }

    def convert(self, text: str, direction: Union[Direction, str]) -> ConversionResult:
        """
        Convert text in the given direction.

        Args:
            text: Input text
            direction: A Direction or its string value, such as
                ``"json-to-yaml"`` or ``"yaml-to-json"``

        Returns:
            ConversionResult with the output text or the error
        """
        try:
            direction = resolve_direction(direction)
        except ConversionError as e:
            self.error_handler.handle_conversion_error(e)
            return ConversionResult(success=False, output="", direction=None, error=e)

        if not text.strip():
            self.logger.debug("Empty input, nothing to convert")
            return ConversionResult(success=True, output="", direction=direction)

        input_size = len(text.encode("utf-8"))
        profiling = self.profiler.profile_operation(direction.value, input_size) if self.profiler else nullcontext()

        try:
            with profiling:
                output, warnings = self._handlers[direction](text)
                if self.profiler:
                    self.profiler.record_output(len(output.encode("utf-8")))
        except ConversionError as e:
            self.error_handler.handle_conversion_error(e)
            return ConversionResult(success=False, output="", direction=direction, error=e)
        except Exception as e:
            self.logger.error(f"Unexpected error in {direction.value} conversion: {e}")
            return ConversionResult(
                success=False,
                output="",
                direction=direction,
                error=ConversionError(f"Unexpected error: {str(e)}", ErrorType.UNEXPECTED)
            )

        self.logger.info(f"Converted {input_size} bytes ({direction.value}) into "
                         f"{len(output.splitlines())} lines")
        return ConversionResult(success=True, output=output, direction=direction, warnings=warnings)

    def json_to_yaml(self, text: str) -> ConversionResult:
        """
        Convert JSON text into block-style YAML text.

        Args:
            text: JSON text

        Returns:
            ConversionResult with YAML output, or the JSON decoder's error
        """
        return self.convert(text, Direction.JSON_TO_YAML)

    def yaml_to_json(self, text: str) -> ConversionResult:
        """
        Convert block-style YAML text into pretty-printed JSON text.

        Args:
            text: YAML text

        Returns:
            ConversionResult with JSON output
        """
        return self.convert(text, Direction.YAML_TO_JSON)

    def reformat_yaml(self, text: str) -> ConversionResult:
        """
        Re-emit YAML text with this transcoder's indentation width.

        Args:
            text: YAML text

        Returns:
            ConversionResult with normalized YAML output
        """
        return self.convert(text, Direction.YAML_TO_YAML)

    def _json_to_yaml(self, text: str) -> Tuple[str, List[str]]:
        value = self.json_codec.decode(text)
        validation = self.error_handler.check_decoded_json(value.to_python())
        return self.serializer.serialize(value), list(validation.warnings)

    def _yaml_to_json(self, text: str) -> Tuple[str, List[str]]:
        validation = self.error_handler.validate_input(text, Direction.YAML_TO_JSON)
        value, parse_warnings = self.parser.parse_with_warnings(text)
        return self.json_codec.encode(value), validation.warnings + parse_warnings

    def _reformat_yaml(self, text: str) -> Tuple[str, List[str]]:
        validation = self.error_handler.validate_input(text, Direction.YAML_TO_YAML)
        value, parse_warnings = self.parser.parse_with_warnings(text, report_comments=True)
        return self.serializer.serialize(value), validation.warnings + parse_warnings


def resolve_direction(direction: Union[Direction, str]) -> Direction:
    """
    Resolve a Direction from an enum member or its string value.

    Raises:
        ConversionError: If the direction is unknown
    """
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except ValueError:
        valid = ", ".join(member.value for member in Direction)
        raise ConversionError(
            f"Unknown conversion direction {direction!r}; expected one of: {valid}",
            ErrorType.CONFIGURATION
        ) from None


def convert(text: str, direction: Union[Direction, str], *,
            strict: bool = False,
            indent_width: int = 2,
            json_indent: int = 2) -> ConversionResult:
    """
    Convert text between JSON and block-style YAML in a single call.

    Args:
        text: Input text
        direction: ``"json-to-yaml"``, ``"yaml-to-json"`` or ``"yaml-to-yaml"``
        strict: Raise conversion errors for malformed YAML
        indent_width: Columns per nesting level in YAML output
        json_indent: Indentation of JSON output

    Returns:
        ConversionResult with the output text or the error
    """
    try:
        transcoder = JsonYamlTranscoder(
            indent_width=indent_width,
            json_indent=json_indent,
            strict=strict
        )
    except ValueError as e:
        return ConversionResult(
            success=False,
            output="",
            direction=None,
            error=ConversionError(str(e), ErrorType.CONFIGURATION)
        )
    return transcoder.convert(text, direction)
