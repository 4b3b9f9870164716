"""Style descriptors for prompt segments"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import StyleError

logger = logging.getLogger(__name__)

COLOR_NAMES = ('black', 'red', 'green', 'yellow', 'blue', 'purple', 'cyan', 'white')

ATTRIBUTES = (
    'bold',
    'italic',
    'underline',
    'dimmed',
    'inverted',
    'blink',
    'hidden',
    'strikethrough',
)

HEX_COLOR = re.compile(r'^#[0-9a-f]{6}$')


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes of a segment"""
    foreground: Optional[str] = None
    background: Optional[str] = None
    attributes: Tuple[str, ...] = ()

    def is_plain(self) -> bool:
        """True when the style sets nothing at all"""
        return self.foreground is None and self.background is None and not self.attributes

    def overlay(self, base: Optional['Style']) -> 'Style':
        """
        Combine this style with a base style

        Every attribute set here wins; attributes this style leaves unset
        are taken from ``base``.
        """
        if base is None or base.is_plain():
            return self
        extra = tuple(attr for attr in base.attributes if attr not in self.attributes)
        return Style(
            foreground=self.foreground or base.foreground,
            background=self.background or base.background,
            attributes=self.attributes + extra,
        )

    def __str__(self) -> str:
        tokens = list(self.attributes)
        if self.foreground:
            tokens.append(f"fg:{self.foreground}")
        if self.background:
            tokens.append(f"bg:{self.background}")
        return ' '.join(tokens) or 'none'


PLAIN = Style()


def parse_color(token: str) -> Optional[str]:
    """Normalize a color token, or return None if it is not a color"""
    token = token.lower()
    if HEX_COLOR.match(token):
        return token
    if token.isdigit():
        index = int(token)
        return str(index) if index <= 255 else None
    name = token[len('bright-'):] if token.startswith('bright-') else token
    if name in COLOR_NAMES:
        return token
    return None


def parse_style(descriptor: str) -> Style:
    """
    Parse a style descriptor such as ``"bold red bg:#303030"``

    Tokens are processed left to right. ``none`` discards everything
    accumulated so far. The first unprefixed color sets the foreground;
    background colors need the ``bg:`` prefix. Tokens that are not
    understood are logged and skipped.
    """
    foreground = None
    background = None
    attributes = []

    for token in descriptor.split():
        lowered = token.lower()

        if lowered == 'none':
            foreground = None
            background = None
            attributes = []
            continue

        if lowered in ATTRIBUTES:
            if lowered not in attributes:
                attributes.append(lowered)
            continue

        prefix, _, value = lowered.partition(':')
        if value and prefix in ('fg', 'bg'):
            color = parse_color(value)
            if color is None:
                logger.warning("Unknown color '%s' in style '%s'", value, descriptor)
            elif prefix == 'fg':
                foreground = color
            else:
                background = color
            continue

        color = parse_color(lowered)
        if color is None:
            logger.warning("Unknown token '%s' in style '%s'", token, descriptor)
        elif foreground is None:
            foreground = color
        else:
            logger.warning(
                "Ignoring color '%s' in style '%s': foreground is already '%s', "
                "use 'bg:' for background colors",
                token, descriptor, foreground,
            )

    return Style(foreground=foreground, background=background, attributes=tuple(attributes))


def coerce_style(value: Union[Style, str]) -> Style:
    """Accept either a Style or a descriptor string"""
    if isinstance(value, Style):
        return value
    if isinstance(value, str):
        return parse_style(value)
    raise StyleError(f"Expected a style or style string, got {type(value).__name__}")
