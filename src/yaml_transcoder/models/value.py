"""Value model: the tagged union every conversion passes through."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple, Union
from ..types import ValueKind


@dataclass
class Null:
    """The null value."""

    kind = ValueKind.NULL

    def is_container(self) -> bool:
        return False

    def to_python(self) -> None:
        return None


@dataclass
class Bool:
    """A boolean value."""

    value: bool

    kind = ValueKind.BOOL

    def is_container(self) -> bool:
        return False

    def to_python(self) -> bool:
        return self.value


@dataclass
class Number:
    """
    A numeric value.

    Integer and decimal lexical forms share this variant. Integers are kept
    as Python ``int`` so that large values survive a round trip exactly;
    ``Number(1) == Number(1.0)`` holds because both compare numerically.
    """

    value: Union[int, float]

    kind = ValueKind.NUMBER

    def __post_init__(self):
        """Validate number after initialization."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"Number value must be int or float, got {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"Number value must be finite, got {self.value!r}")

    def is_container(self) -> bool:
        return False

    def to_text(self) -> str:
        """
        Render the canonical decimal text of the number.

        Integral values are written without a fractional part, the way a
        JavaScript number prints, so ``1.0`` becomes ``1``.
        """
        if isinstance(self.value, int):
            return str(self.value)
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def to_python(self) -> Union[int, float]:
        return self.value


@dataclass
class Str:
    """A string value."""

    value: str

    kind = ValueKind.STR

    def is_container(self) -> bool:
        return False

    def to_python(self) -> str:
        return self.value


@dataclass
class Sequence:
    """An ordered list of values."""

    items: List["Value"] = field(default_factory=list)

    kind = ValueKind.SEQUENCE

    def is_container(self) -> bool:
        return True

    def append(self, value: "Value") -> None:
        self.items.append(value)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]


@dataclass
class Mapping:
    """
    An ordered mapping of string keys to values.

    Keys are unique. Assigning an existing key replaces its value but keeps
    the key in its original position.
    """

    entries: Dict[str, "Value"] = field(default_factory=dict)

    kind = ValueKind.MAPPING

    def is_container(self) -> bool:
        return True

    def set(self, key: str, value: "Value") -> None:
        self.entries[key] = value

    def get(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def items(self) -> Iterator[Tuple[str, "Value"]]:
        return iter(self.entries.items())

    def to_python(self) -> Dict[str, Any]:
        return {key: value.to_python() for key, value in self.entries.items()}


Value = Union[Null, Bool, Number, Str, Sequence, Mapping]
Container = Union[Sequence, Mapping]


def from_python(data: Any) -> Value:
    """
    Build a Value tree from JSON-shaped Python data.

    Args:
        data: Output of ``json.loads`` or an equivalent structure

    Returns:
        Value tree mirroring the input

    Raises:
        TypeError: If the data holds a type with no Value counterpart
        ValueError: If the data holds a non-finite float
    """
    if data is None:
        return Null()
    # bool is a subclass of int and has to be checked first
    if isinstance(data, bool):
        return Bool(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, str):
        return Str(data)
    if isinstance(data, (list, tuple)):
        return Sequence([from_python(item) for item in data])
    if isinstance(data, dict):
        mapping = Mapping()
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Mapping keys must be strings, got {type(key).__name__}")
            mapping.set(key, from_python(value))
        return mapping
    raise TypeError(f"Unsupported value type: {type(data).__name__}")


def to_python(value: Value) -> Any:
    """Convert a Value tree back into plain Python data."""
    return value.to_python()

