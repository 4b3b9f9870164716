"""Parser for the format string mini-language

Grammar, informally::

    format    := (literal | variable | group | textgroup)*
    variable  := '$' name | '${' name '}'
    group     := '(' format ')'
    textgroup := '[' format ']' ( '(' style ')' )?

``\\`` escapes ``$ ( ) [ ] \\``. A ``( )`` group is conditional; a textgroup
only carries a style, and one without a style part carries none.
"""

import string
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from .errors import DanglingEscape, UnbalancedDelimiter

VARIABLE_CHARS = frozenset(string.ascii_letters + string.digits + '_')
ESCAPABLE = frozenset('$()[]\\')
CLOSERS = {'(': ')', '[': ']'}


@dataclass(frozen=True)
class Literal:
    """Text copied to the output as is"""
    text: str


@dataclass(frozen=True)
class VariableRef:
    """A ``$name`` reference resolved at render time"""
    name: str


@dataclass(frozen=True)
class StyleRef:
    """Style part of a textgroup: descriptor tokens and ``$style`` references"""
    parts: Tuple[Union[str, VariableRef], ...] = ()

    def variables(self) -> Iterator[str]:
        for part in self.parts:
            if isinstance(part, VariableRef):
                yield part.name


@dataclass(frozen=True)
class Group:
    """A ``( )`` conditional subtree, or a ``[ ]`` textgroup carrying a style"""
    style: Optional[StyleRef]
    children: Tuple['Node', ...]

    @property
    def is_conditional(self) -> bool:
        return self.style is None


Node = Union[Literal, VariableRef, Group]


@dataclass(frozen=True)
class Template:
    """Parsed format string"""
    nodes: Tuple[Node, ...]

    def variables(self) -> List[str]:
        """Names of all variables in text position, in order of appearance"""
        names: List[str] = []
        _collect_variables(self.nodes, names)
        return names

    def style_variables(self) -> List[str]:
        """Names of all variables referenced from style descriptors"""
        names: List[str] = []
        _collect_style_variables(self.nodes, names)
        return names

    def to_format_string(self) -> str:
        """Serialize back into a format string that parses to this template"""
        return ''.join(_serialize(node) for node in self.nodes)


def _collect_variables(nodes: Tuple[Node, ...], names: List[str]):
    for node in nodes:
        if isinstance(node, VariableRef):
            if node.name not in names:
                names.append(node.name)
        elif isinstance(node, Group):
            _collect_variables(node.children, names)


def _collect_style_variables(nodes: Tuple[Node, ...], names: List[str]):
    for node in nodes:
        if isinstance(node, Group):
            if node.style is not None:
                for name in node.style.variables():
                    if name not in names:
                        names.append(name)
            _collect_style_variables(node.children, names)


def _escape(text: str) -> str:
    return ''.join('\\' + char if char in ESCAPABLE else char for char in text)


def _serialize(node: Node) -> str:
    if isinstance(node, Literal):
        return _escape(node.text)
    if isinstance(node, VariableRef):
        return '${%s}' % node.name
    inner = ''.join(_serialize(child) for child in node.children)
    if node.style is None:
        return f"({inner})"
    tokens = ['$' + part.name if isinstance(part, VariableRef) else part for part in node.style.parts]
    return f"[{inner}]({' '.join(tokens)})"


class _Parser:
    """Recursive descent over a single format string"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Template:
        return Template(self._sequence(None, None))

    def _peek(self) -> Optional[str]:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _sequence(self, opener: Optional[str], opened_at: Optional[int]) -> Tuple[Node, ...]:
        closer = CLOSERS.get(opener) if opener else None
        nodes: List[Node] = []
        buffer: List[str] = []

        def flush():
            if buffer:
                nodes.append(Literal(''.join(buffer)))
                buffer.clear()

        while self.pos < len(self.text):
            char = self.text[self.pos]

            if char == '\\':
                if self.pos + 1 >= len(self.text):
                    raise DanglingEscape(self.pos)
                escaped = self.text[self.pos + 1]
                if escaped not in ESCAPABLE:
                    buffer.append(char)
                buffer.append(escaped)
                self.pos += 2

            elif char == '$':
                name = self._variable_name()
                if name is None:
                    buffer.append(char)
                    self.pos += 1
                else:
                    flush()
                    nodes.append(VariableRef(name))

            elif char in CLOSERS:
                start = self.pos
                self.pos += 1
                children = self._sequence(char, start)
                style = None
                if char == '[':
                    style = self._style_ref() if self._peek() == '(' else StyleRef()
                flush()
                nodes.append(Group(style, children))

            elif char in (')', ']'):
                if char != closer:
                    raise UnbalancedDelimiter(char, self.pos)
                self.pos += 1
                flush()
                return tuple(nodes)

            else:
                buffer.append(char)
                self.pos += 1

        if opener is not None:
            raise UnbalancedDelimiter(opener, opened_at)
        flush()
        return tuple(nodes)

    def _variable_name(self) -> Optional[str]:
        """Read a variable after ``$``; None means the ``$`` is literal"""
        start = self.pos + 1
        if self.text.startswith('{', start):
            end = self.text.find('}', start + 1)
            if end == -1:
                raise UnbalancedDelimiter('{', start)
            name = self.text[start + 1:end]
            if not name or not VARIABLE_CHARS.issuperset(name):
                return None
            self.pos = end + 1
            return name

        end = start
        while end < len(self.text) and self.text[end] in VARIABLE_CHARS:
            end += 1
        if end == start:
            return None
        self.pos = end
        return self.text[start:end]

    def _style_ref(self) -> StyleRef:
        """Read the ``(descriptor)`` following a closing ``]``"""
        opened_at = self.pos
        end = self.pos + 1
        while end < len(self.text) and self.text[end] != ')':
            if self.text[end] in '([]':
                raise UnbalancedDelimiter(self.text[end], end)
            end += 1
        if end >= len(self.text):
            raise UnbalancedDelimiter('(', opened_at)

        parts: List[Union[str, VariableRef]] = []
        for token in self.text[self.pos + 1:end].split():
            name = _style_variable(token)
            parts.append(VariableRef(name) if name else token)
        self.pos = end + 1
        return StyleRef(tuple(parts))


def _style_variable(token: str) -> Optional[str]:
    if not token.startswith('$'):
        return None
    name = token[1:]
    if name.startswith('{') and name.endswith('}'):
        name = name[1:-1]
    if name and VARIABLE_CHARS.issuperset(name):
        return name
    return None


def parse(format_string: str) -> Template:
    """
    Parse a format string into a Template

    Raises:
        UnbalancedDelimiter: a bracket, parenthesis or brace has no partner
        DanglingEscape: the string ends with a lone backslash
    """
    return _Parser(format_string).parse()
