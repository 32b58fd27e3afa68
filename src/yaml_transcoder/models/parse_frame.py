"""Parse frame model and the explicit frame stack used by the YAML parser."""

from dataclasses import dataclass
from typing import List, Optional, Union
from .value import Container, Mapping, Sequence


@dataclass
class ParseFrame:
    """
    One open container while reading block-style text.

    Lines indented deeper than ``indent`` belong to this frame. ``container``
    stays ``None`` until the first such line decides whether it is a mapping
    or a sequence. ``parent`` and ``pending_key`` name the slot the container
    fills: a key of a parent mapping or an index of a parent sequence. The
    document root frame has neither.
    """

    indent: int
    container: Optional[Container] = None
    parent: Optional[Container] = None
    pending_key: Optional[Union[str, int]] = None

    def is_root(self) -> bool:
        return self.parent is None

    def awaits_mapping_value(self) -> bool:
        """Check whether this frame fills the value of a mapping key."""
        return isinstance(self.parent, Mapping) and isinstance(self.pending_key, str)

    def fill(self, container: Container) -> None:
        """
        Install ``container`` as this frame's container and store it in the
        parent slot.
        """
        self.container = container
        if isinstance(self.parent, Mapping):
            self.parent.set(self.pending_key, container)
        elif isinstance(self.parent, Sequence):
            self.parent.items[self.pending_key] = container


class FrameStack:
    """
    Stack of parse frames, innermost container on top.

    The bottom frame is the document root and is never popped.
    """

    ROOT_INDENT = -1

    def __init__(self):
        self._frames: List[ParseFrame] = [ParseFrame(indent=self.ROOT_INDENT)]

    @property
    def root(self) -> ParseFrame:
        return self._frames[0]

    @property
    def top(self) -> ParseFrame:
        return self._frames[-1]

    def push(self, frame: ParseFrame) -> ParseFrame:
        self._frames.append(frame)
        return frame

    def pop(self) -> ParseFrame:
        if len(self._frames) == 1:
            raise IndexError("cannot pop the document root frame")
        return self._frames.pop()

    def unwind(self, indent: int, sequence_item: bool = False) -> int:
        """
        Pop frames until the top frame owns a line at ``indent``.

        A frame owns lines indented deeper than its own indent. A sequence
        item at exactly the indent of a key still waiting for its value
        belongs to that key (``key:`` followed by ``- item`` on the same
        column).

        Args:
            indent: Leading whitespace count of the current line
            sequence_item: Whether the current line is a ``- `` item

        Returns:
            Number of frames popped
        """
        popped = 0
        while self.top.indent >= indent:
            if sequence_item and self.top.indent == indent and self._accepts_indentless_item(self.top):
                break
            self.pop()
            popped += 1
        return popped

    @staticmethod
    def _accepts_indentless_item(frame: ParseFrame) -> bool:
        if not frame.awaits_mapping_value():
            return False
        container = frame.container
        return container is None or isinstance(container, Sequence) or len(container) == 0

    def __len__(self) -> int:
        return len(self._frames)
