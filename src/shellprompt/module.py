"""Rendered output of one prompt module"""

from typing import List, Optional

from .formatter import Segment, segments_text


class Module:
    """A named group of segments contributed to the prompt"""

    def __init__(self, name: str):
        self.name = name
        self.segments: List[Segment] = []
        self.duration: Optional[float] = None

    def set_segments(self, segments: List[Segment]):
        self.segments = list(segments)

    @property
    def text(self) -> str:
        return segments_text(self.segments)

    def is_empty(self) -> bool:
        """True when the module would only print whitespace"""
        return not self.text.strip()

    def __repr__(self) -> str:
        return f"Module({self.name!r}, {self.text!r})"
