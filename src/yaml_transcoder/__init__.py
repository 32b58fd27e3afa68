"""
YAML Transcoder - Bidirectional JSON/YAML conversion.

Converts JSON documents into block-style, indentation-driven YAML text
and parses that text back into JSON.
"""

from .transcoder import JsonYamlTranscoder, convert
from .models import Null, Bool, Number, Str, Sequence, Mapping, from_python, to_python
from .serializer import YamlSerializer, to_yaml_text
from .yaml_parser import YamlParser, from_yaml_text
from .types import ConversionResult, ConversionError, Direction, ErrorType

__version__ = "1.0.0"
__all__ = [
    "JsonYamlTranscoder",
    "convert",
    "YamlSerializer",
    "YamlParser",
    "to_yaml_text",
    "from_yaml_text",
    "Null",
    "Bool",
    "Number",
    "Str",
    "Sequence",
    "Mapping",
    "from_python",
    "to_python",
    "ConversionResult",
    "ConversionError",
    "Direction",
    "ErrorType",
]
