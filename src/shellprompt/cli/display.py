"""Convert rendered segments into rich text"""

from typing import Iterable, Optional

from rich.style import Style as RichStyle
from rich.text import Text

from ..formatter import Segment, Style

RICH_ATTRIBUTES = {
    'bold': 'bold',
    'italic': 'italic',
    'underline': 'underline',
    'dimmed': 'dim',
    'inverted': 'reverse',
    'blink': 'blink',
    'hidden': 'conceal',
    'strikethrough': 'strike',
}


def to_rich_color(color: Optional[str]) -> Optional[str]:
    """Translate a color token into rich's color syntax"""
    if color is None:
        return None
    if color.isdigit():
        return f"color({color})"
    if color.startswith('#'):
        return color
    color = color.replace('purple', 'magenta')
    return color.replace('bright-', 'bright_')


def to_rich_style(style: Style) -> RichStyle:
    flags = {RICH_ATTRIBUTES[attr]: True for attr in style.attributes if attr in RICH_ATTRIBUTES}
    return RichStyle(
        color=to_rich_color(style.foreground),
        bgcolor=to_rich_color(style.background),
        **flags,
    )


def segments_to_text(segments: Iterable[Segment]) -> Text:
    text = Text()
    for segment in segments:
        text.append(segment.text, style=to_rich_style(segment.style))
    return text
