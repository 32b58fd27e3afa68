"""Validation utilities for conversion input and parameters."""

import json
import re
from typing import Any
from ..types import ValidationResult, ValidationError, ErrorType


MAX_RECOMMENDED_DEPTH = 20

DOCUMENT_MARKERS = ("---", "...")
BLOCK_SCALAR_INDICATORS = ("|", ">", "|-", ">-", "|+", ">+")
FLOW_COLLECTION_PATTERN = re.compile(r"^[\[{].*[\]}]$")
ANCHOR_PATTERN = re.compile(r"^[&*][^\s]+")


class ValidationUtils:
    """Utility class for validating conversion input."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        warnings.extend(ValidationUtils.validate_nesting_depth(data).warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_nesting_depth(data: Any) -> ValidationResult:
        """
        Warn about documents nested deeper than is comfortable to read as YAML.

        Args:
            data: Decoded JSON-shaped data

        Returns:
            ValidationResult, always valid, with a warning for deep nesting
        """
        warnings = []
        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). "
                            "The YAML output will be heavily indented.")
        return ValidationResult(is_valid=True, errors=[], warnings=warnings)

    @staticmethod
    def validate_yaml_text(yaml_text: str) -> ValidationResult:
        """
        Check YAML text for constructs the block parser does not support.

        The parser never rejects input in its default mode, so findings are
        reported as warnings: they mark places where the result may differ
        from what a full YAML parser would produce.

        Args:
            yaml_text: YAML text to inspect

        Returns:
            ValidationResult with warnings for unsupported constructs
        """
        warnings = []

        for line_number, line in enumerate(yaml_text.split("\n"), start=1):
            content = line.strip()
            if not content or content.startswith("#"):
                continue

            leading = line[:len(line) - len(line.lstrip())]
            if "\t" in leading:
                warnings.append(f"Line {line_number}: tab character in indentation")

            if content in DOCUMENT_MARKERS:
                warnings.append(f"Line {line_number}: document markers are not supported")
                continue

            value_text = ValidationUtils._value_part(content)
            if value_text in BLOCK_SCALAR_INDICATORS:
                warnings.append(f"Line {line_number}: block scalars are not supported")
            elif value_text not in ("[]", "{}") and FLOW_COLLECTION_PATTERN.match(value_text):
                warnings.append(f"Line {line_number}: flow collections are read as plain strings")
            elif ANCHOR_PATTERN.match(value_text):
                warnings.append(f"Line {line_number}: anchors and aliases are read as plain strings")

        return ValidationResult(is_valid=True, errors=[], warnings=warnings)

    @staticmethod
    def validate_indent_width(width: int, minimum: int = 1, maximum: int = 8) -> ValidationResult:
        """
        Validate an indentation width parameter.

        Args:
            width: Columns per nesting level
            minimum: Smallest accepted width
            maximum: Largest accepted width

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(width, int) or isinstance(width, bool):
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message=f"Indent width must be an integer, got {type(width).__name__}",
                location="indent_width"
            ))
        elif not minimum <= width <= maximum:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message=f"Indent width must be between {minimum} and {maximum}, got {width}",
                location="indent_width"
            ))
        elif width == 1:
            warnings.append("Indent width of 1 makes nesting hard to read.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _value_part(content: str) -> str:
        """Return the value text of an entry or item line."""
        if content.startswith("- "):
            content = content[2:].strip()
        colon_index = content.find(":")
        if colon_index != -1 and not content.startswith(('"', "'")):
            return content[colon_index + 1:].strip()
        return content

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth

        if isinstance(data, dict):
            for value in data.values():
                child_depth = ValidationUtils._calculate_max_depth(value, current_depth + 1)
                max_child_depth = max(max_child_depth, child_depth)
        else:  # list
            for item in data:
                child_depth = ValidationUtils._calculate_max_depth(item, current_depth + 1)
                max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

