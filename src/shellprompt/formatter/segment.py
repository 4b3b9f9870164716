"""Rendered output unit"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .style import PLAIN, Style


@dataclass(frozen=True)
class Segment:
    """A span of text with a single style"""
    text: str
    style: Style = PLAIN

    def restyle(self, base: Optional[Style]) -> 'Segment':
        """Fill the gaps in this segment's style from ``base``"""
        return Segment(self.text, self.style.overlay(base))


def merge_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Drop empty segments and join neighbours that share a style"""
    merged: List[Segment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].style == segment.style:
            merged[-1] = Segment(merged[-1].text + segment.text, segment.style)
        else:
            merged.append(segment)
    return merged


def segments_text(segments: Iterable[Segment]) -> str:
    """Concatenate the text of a segment sequence"""
    return ''.join(segment.text for segment in segments)
