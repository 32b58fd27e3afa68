"""Tests for data models."""

import pytest
from yaml_transcoder.types import ValueKind
from yaml_transcoder.models import (
    Null, Bool, Number, Str, Sequence, Mapping,
    ParseFrame, FrameStack, from_python, to_python
)


class TestValueModel:
    """Tests for the Value variants."""

    def test_kinds(self):
        """Test that every variant reports its kind."""
        assert Null().kind == ValueKind.NULL
        assert Bool(True).kind == ValueKind.BOOL
        assert Number(1).kind == ValueKind.NUMBER
        assert Str("a").kind == ValueKind.STR
        assert Sequence().kind == ValueKind.SEQUENCE
        assert Mapping().kind == ValueKind.MAPPING

    def test_containers(self):
        """Test container detection."""
        assert Sequence().is_container()
        assert Mapping().is_container()
        assert not Str("x").is_container()
        assert not Null().is_container()

    def test_number_equality_across_lexical_forms(self):
        """Test that integer and decimal forms compare as one numeric domain."""
        assert Number(1) == Number(1.0)
        assert Number(2) != Number(2.5)

    def test_bool_is_not_number(self):
        """Test that Bool and Number never compare equal."""
        assert Bool(True) != Number(1)

    def test_number_rejects_bool(self):
        """Test that booleans cannot be stored as numbers."""
        with pytest.raises(ValueError, match="must be int or float"):
            Number(True)

    def test_number_rejects_non_finite(self):
        """Test that NaN and infinity are rejected."""
        with pytest.raises(ValueError, match="must be finite"):
            Number(float("nan"))
        with pytest.raises(ValueError, match="must be finite"):
            Number(float("inf"))

    def test_number_text(self):
        """Test canonical number text."""
        assert Number(42).to_text() == "42"
        assert Number(-7).to_text() == "-7"
        assert Number(1.0).to_text() == "1"
        assert Number(3.14).to_text() == "3.14"
        assert Number(12345678901234567890).to_text() == "12345678901234567890"

    def test_mapping_preserves_insertion_order(self):
        """Test that mapping keys keep insertion order."""
        mapping = Mapping()
        mapping.set("b", Number(1))
        mapping.set("a", Number(2))

        assert [key for key, _ in mapping.items()] == ["b", "a"]

    def test_mapping_reassignment_keeps_position(self):
        """Test that assigning an existing key keeps its position."""
        mapping = Mapping()
        mapping.set("first", Number(1))
        mapping.set("second", Number(2))
        mapping.set("first", Str("again"))

        assert [key for key, _ in mapping.items()] == ["first", "second"]
        assert mapping.get("first") == Str("again")
        assert len(mapping) == 2


class TestPythonConversion:
    """Tests for from_python and to_python."""

    def test_from_python_nested(self, sample_nested_json):
        """Test building a value tree from nested data."""
        value = from_python(sample_nested_json)

        assert isinstance(value, Mapping)
        service = value.get("service")
        assert service.get("replicas") == Number(3)
        assert service.get("debug") == Bool(False)
        assert service.get("owner") == Null()
        assert value.get("ports") == Sequence([Number(80), Number(443)])
        assert value.get("empty_map") == Mapping()

    def test_from_python_bool_before_int(self):
        """Test that booleans become Bool rather than Number."""
        assert from_python(True) == Bool(True)
        assert from_python(0) == Number(0)

    def test_round_trip_python(self, sample_nested_json):
        """Test that to_python inverts from_python."""
        assert to_python(from_python(sample_nested_json)) == sample_nested_json

    def test_unsupported_type(self):
        """Test that unsupported types raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported value type"):
            from_python({"when": object()})

    def test_non_string_key(self):
        """Test that non-string keys raise TypeError."""
        with pytest.raises(TypeError, match="keys must be strings"):
            from_python({1: "one"})


class TestFrameStack:
    """Tests for ParseFrame and FrameStack."""

    def test_root_frame(self):
        """Test the initial root frame."""
        stack = FrameStack()

        assert len(stack) == 1
        assert stack.top is stack.root
        assert stack.root.is_root()
        assert stack.root.container is None

    def test_root_is_never_popped(self):
        """Test that unwinding stops at the root frame."""
        stack = FrameStack()
        stack.push(ParseFrame(indent=0, container=Mapping(), parent=Mapping(), pending_key="a"))

        popped = stack.unwind(0)

        assert popped == 1
        assert stack.top is stack.root
        with pytest.raises(IndexError):
            stack.pop()

    def test_unwind_pops_while_indent_not_smaller(self):
        """Test that frames at or beyond the current indent are popped."""
        stack = FrameStack()
        parent = Mapping()
        stack.push(ParseFrame(indent=0, container=Mapping(), parent=parent, pending_key="a"))
        stack.push(ParseFrame(indent=2, container=Mapping(), parent=parent, pending_key="b"))
        stack.push(ParseFrame(indent=4, container=Mapping(), parent=parent, pending_key="c"))

        stack.unwind(3)

        assert stack.top.indent == 2
        assert len(stack) == 3

    def test_unwind_keeps_key_frame_for_indentless_item(self):
        """Test that an item at the key's own indent stays under the key."""
        stack = FrameStack()
        parent = Mapping()
        placeholder = Mapping()
        parent.set("items", placeholder)
        stack.push(ParseFrame(indent=0, container=placeholder, parent=parent, pending_key="items"))

        assert stack.unwind(0, sequence_item=True) == 0
        assert stack.top.pending_key == "items"

    def test_unwind_pops_filled_key_frame_for_item(self):
        """Test that a key whose mapping already has entries does not take items."""
        stack = FrameStack()
        parent = Mapping()
        nested = Mapping({"x": Number(1)})
        stack.push(ParseFrame(indent=0, container=nested, parent=parent, pending_key="items"))

        assert stack.unwind(0, sequence_item=True) == 1

    def test_fill_mapping_slot(self):
        """Test that fill stores the container under the pending key."""
        parent = Mapping()
        parent.set("items", Mapping())
        frame = ParseFrame(indent=0, container=parent.get("items"), parent=parent, pending_key="items")

        sequence = Sequence()
        frame.fill(sequence)

        assert parent.get("items") is sequence
        assert frame.container is sequence

    def test_fill_sequence_slot(self):
        """Test that fill replaces the sequence element at the pending index."""
        parent = Sequence([Str("a"), Null()])
        frame = ParseFrame(indent=0, container=None, parent=parent, pending_key=1)

        mapping = Mapping()
        frame.fill(mapping)

        assert parent.items[1] is mapping

    def test_unwind_never_removes_root(self):
        """Test that unwinding below the root indent hits the root guard."""
        stack = FrameStack()

        with pytest.raises(IndexError):
            stack.unwind(FrameStack.ROOT_INDENT)
        assert len(stack) == 1
