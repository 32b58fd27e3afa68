"""Error handling implementation for the YAML Transcoder."""

import logging
from typing import Any, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType,
    Direction
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for YAML Transcoder operations.

    Provides input validation and maps conversion errors to
    recovery suggestions for the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: str, direction: Direction) -> ValidationResult:
        """
        Validate input text for a conversion direction.

        Args:
            text: Input text to validate
            direction: Direction the text will be converted in

        Returns:
            ValidationResult with validation details
        """
        try:
            if direction == Direction.JSON_TO_YAML:
                result = ValidationUtils.validate_json_string(text)
            else:
                result = ValidationUtils.validate_yaml_text(text)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.UNEXPECTED,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def check_decoded_json(self, data: Any) -> ValidationResult:
        """
        Check an already decoded JSON document before it is rendered as YAML.

        Args:
            data: Decoded JSON-shaped data

        Returns:
            ValidationResult with warnings for deep nesting
        """
        result = ValidationUtils.validate_nesting_depth(data)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle conversion errors and provide recovery suggestions.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return self._handle_syntax_error(error)
        elif error.error_type == ErrorType.STRUCTURE:
            return self._handle_structure_error(error)
        elif error.error_type == ErrorType.CONFIGURATION:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Check the conversion direction and indentation settings."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def _handle_syntax_error(self, error: ConversionError) -> ErrorResponse:
        """Handle input syntax errors."""
        if error.location:
            action = f"Fix the input near {error.location} and convert again."
        else:
            action = "Fix the input syntax at the reported position and convert again."
        return ErrorResponse(can_recover=True, suggested_action=action)

    def _handle_structure_error(self, error: ConversionError) -> ErrorResponse:
        """Handle unsupported or conflicting structure."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Remove values that cannot be represented (such as NaN or Infinity) "
                             "or disable strict mode to accept a best-effort result."
        )

    def validate_indent_parameter(self, width: int) -> ValidationResult:
        """
        Validate indentation width for YAML output.

        Args:
            width: Columns per nesting level

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_indent_width(width)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result
