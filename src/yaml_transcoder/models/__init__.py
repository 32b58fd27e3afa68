"""Data models for the YAML Transcoder."""

from .value import (
    Value,
    Container,
    Null,
    Bool,
    Number,
    Str,
    Sequence,
    Mapping,
    from_python,
    to_python,
)
from .parse_frame import ParseFrame, FrameStack

__all__ = [
    "Value",
    "Container",
    "Null",
    "Bool",
    "Number",
    "Str",
    "Sequence",
    "Mapping",
    "from_python",
    "to_python",
    "ParseFrame",
    "FrameStack",
]
