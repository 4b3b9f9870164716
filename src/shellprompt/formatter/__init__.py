"""Format string parsing, styling and rendering"""

from .errors import (
    DanglingEscape,
    FormatterError,
    ParseError,
    ResolutionError,
    ResolverFailed,
    StyleError,
    UnbalancedDelimiter,
    UnknownVariable,
)
from .parser import Group, Literal, StyleRef, Template, VariableRef, parse
from .renderer import Resolvers, render
from .segment import Segment, merge_segments, segments_text
from .string_formatter import StringFormatter
from .style import PLAIN, Style, parse_style

__all__ = [
    'DanglingEscape',
    'FormatterError',
    'ParseError',
    'ResolutionError',
    'ResolverFailed',
    'StyleError',
    'UnbalancedDelimiter',
    'UnknownVariable',
    'Group',
    'Literal',
    'StyleRef',
    'Template',
    'VariableRef',
    'parse',
    'Resolvers',
    'render',
    'Segment',
    'merge_segments',
    'segments_text',
    'StringFormatter',
    'PLAIN',
    'Style',
    'parse_style',
]
