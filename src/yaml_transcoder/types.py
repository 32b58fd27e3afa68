"""Core type definitions for the YAML Transcoder."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union


class ValueKind(Enum):
    """Enumeration of value variants."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STR = "str"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class Direction(Enum):
    """Enumeration of conversion directions."""
    JSON_TO_YAML = "json-to-yaml"
    YAML_TO_JSON = "yaml-to-json"
    YAML_TO_YAML = "yaml-to-yaml"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    CONFIGURATION = "configuration"
    UNEXPECTED = "unexpected"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Error raised while converting between JSON and YAML text."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.SYNTAX,
                 location: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.location = location

    def __str__(self) -> str:
        if self.location:
            return f"{self.message} ({self.location})"
        return self.message


@dataclass
class ConversionResult:
    """Result of a convert operation."""
    success: bool
    output: str
    direction: Optional[Direction]
    error: Optional[ConversionError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable error message, if the conversion failed."""
        return str(self.error) if self.error else None


# Abstract base classes for interfaces

class TranscoderInterface(ABC):
    """Abstract interface for the JSON/YAML transcoder."""

    @abstractmethod
    def convert(self, text: str, direction: Union[Direction, str]) -> ConversionResult:
        """Convert text in the given direction."""
        pass

    @abstractmethod
    def json_to_yaml(self, text: str) -> ConversionResult:
        """Convert JSON text into block-style YAML text."""
        pass

    @abstractmethod
    def yaml_to_json(self, text: str) -> ConversionResult:
        """Convert block-style YAML text into pretty-printed JSON text."""
        pass


class SerializerInterface(ABC):
    """Abstract interface for value serializers."""

    @abstractmethod
    def serialize(self, value: Any) -> str:
        """Render a value tree as text."""
        pass


class ParserInterface(ABC):
    """Abstract interface for text parsers."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Reconstruct a value tree from text."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, text: str, direction: Direction) -> ValidationResult:
        """Validate input text for a direction."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
