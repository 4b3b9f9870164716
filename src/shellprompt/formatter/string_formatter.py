"""Fluent front end over the parser and renderer"""

from typing import Any, Callable, List, Optional

from .parser import parse
from .renderer import Resolvers, render
from .segment import Segment
from .style import Style

MetaMapper = Callable[[str, Any], Optional[str]]
StyleMapper = Callable[[str], Optional[Any]]
ValueMapper = Callable[[str], Optional[Any]]


class StringFormatter(Resolvers):
    """
    Parse a format string once, then register mappers and render

    Mappers are tried in registration order within their category; the
    first one returning something other than None claims the variable.

    Example:
        segments = (StringFormatter("via [$symbol($version )]($style)")
                    .map_meta(lambda var, _: "🌙 " if var == "symbol" else None)
                    .map_style(lambda var: "bold blue" if var == "style" else None)
                    .map(lambda var: "v5.4.0" if var == "version" else None)
                    .parse())
    """

    def __init__(self, format_string: str):
        """Parse the format string; raises ParseError if it is malformed"""
        self.format_string = format_string
        self.template = parse(format_string)
        self._meta: List[MetaMapper] = []
        self._style: List[StyleMapper] = []
        self._value: List[ValueMapper] = []

    def map_meta(self, mapper: MetaMapper) -> 'StringFormatter':
        self._meta.append(mapper)
        return self

    def map_style(self, mapper: StyleMapper) -> 'StringFormatter':
        self._style.append(mapper)
        return self

    def map(self, mapper: ValueMapper) -> 'StringFormatter':
        self._value.append(mapper)
        return self

    def lookup_meta(self, name: str, context: Any) -> Optional[str]:
        for mapper in self._meta:
            value = mapper(name, context)
            if value is not None:
                return value
        return None

    def lookup_style(self, name: str) -> Optional[Any]:
        for mapper in self._style:
            value = mapper(name)
            if value is not None:
                return value
        return None

    def lookup_value(self, name: str, context: Any) -> Optional[Any]:
        for mapper in self._value:
            value = mapper(name)
            if value is not None:
                return value
        return None

    def parse(self, default_style: Optional[Style] = None, context: Any = None) -> List[Segment]:
        """Render the template with the registered mappers"""
        return render(self.template, self, default_style=default_style, context=context)
