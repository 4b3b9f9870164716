"""Resolve a parsed template into styled segments

Every variable reference resolves to one of three outcomes: present,
absent or failed. Absence inside a `( )` group hides the outermost such
group that contains it; absence outside any of them is an error. A
`[text](style)` group only styles what its children produce. A failure
always aborts the render.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import ResolverFailed, UnknownVariable
from .parser import Group, Literal, Node, StyleRef, Template, VariableRef, parse
from .segment import Segment, merge_segments
from .style import PLAIN, Style, coerce_style, parse_style


@dataclass(frozen=True)
class Present:
    """A resolver supplied a value"""
    value: Any


@dataclass(frozen=True)
class Failed:
    """A resolver reported an error"""
    cause: BaseException


class _Absent:
    """No resolver claimed the variable"""

    def __repr__(self) -> str:
        return 'ABSENT'


ABSENT = _Absent()

Outcome = Any  # Present | Failed | ABSENT


class Resolvers(ABC):
    """
    Variable lookups consulted while rendering

    Each lookup returns None when it does not know the variable. Raising
    an exception reports a failure for that variable.
    """

    def lookup_meta(self, name: str, context: Any) -> Optional[str]:
        """Return a format string to be expanded in place of ``$name``"""
        return None

    def lookup_style(self, name: str) -> Optional[Any]:
        """Return a Style or style descriptor for ``$name``"""
        return None

    @abstractmethod
    def lookup_value(self, name: str, context: Any) -> Optional[str]:
        """Return the text for ``$name``"""


def _outcome(lookup: Callable[[], Any]) -> Outcome:
    try:
        value = lookup()
    except Exception as e:
        return Failed(e)
    return ABSENT if value is None else Present(value)


class _Renderer:
    """Single render pass; lookups are made at most once per variable"""

    def __init__(self, resolvers: Resolvers, context: Any):
        self.resolvers = resolvers
        self.context = context
        self._text_outcomes: Dict[Tuple[str, bool], Outcome] = {}
        self._style_outcomes: Dict[str, Outcome] = {}
        self._meta_templates: Dict[str, Template] = {}

    def render(self, template: Template, default_style: Optional[Style]) -> List[Segment]:
        segments, _ = self._nodes(template.nodes, in_group=False, allow_meta=True)
        return merge_segments(segment.restyle(default_style) for segment in segments)

    def _nodes(self, nodes: Tuple[Node, ...], in_group: bool,
               allow_meta: bool) -> Tuple[List[Segment], bool]:
        """Render a node sequence; the flag reports an absent variable"""
        segments: List[Segment] = []
        absent = False

        for node in nodes:
            if isinstance(node, Literal):
                segments.append(Segment(node.text))

            elif isinstance(node, VariableRef):
                rendered = self._variable(node.name, in_group, allow_meta)
                if rendered is None:
                    absent = True
                else:
                    segments.extend(rendered)

            elif isinstance(node, Group):
                rendered, group_absent = self._group(node, in_group, allow_meta)
                if group_absent:
                    # only reachable inside a conditional group
                    absent = True
                else:
                    segments.extend(rendered)

        return segments, absent

    def _group(self, group: Group, in_group: bool, allow_meta: bool) -> Tuple[List[Segment], bool]:
        if group.is_conditional:
            children, absent = self._nodes(group.children, in_group=True, allow_meta=allow_meta)
            # an omitted group reports absence upward only while enclosed by another
            return ([], in_group) if absent else (children, False)

        # textgroups are transparent to absence
        children, absent = self._nodes(group.children, in_group=in_group, allow_meta=allow_meta)
        style = self._style_ref(group.style)
        return [child.restyle(style) for child in children], absent

    def _style_ref(self, style_ref: StyleRef) -> Style:
        """Combine descriptor tokens and style variables; later parts win"""
        style = PLAIN
        pending: List[str] = []

        for part in style_ref.parts:
            if isinstance(part, VariableRef):
                if pending:
                    style = parse_style(' '.join(pending)).overlay(style)
                    pending = []
                resolved = self._style_variable(part.name)
                if resolved is not None:
                    style = resolved.overlay(style)
            else:
                pending.append(part)

        if pending:
            style = parse_style(' '.join(pending)).overlay(style)
        return style

    def _style_variable(self, name: str) -> Optional[Style]:
        outcome = self._lookup_style(name)
        if isinstance(outcome, Failed):
            raise ResolverFailed(name, outcome.cause)
        if outcome is ABSENT:
            return None
        return outcome.value

    def _lookup_style(self, name: str) -> Outcome:
        if name not in self._style_outcomes:
            outcome = _outcome(lambda: self.resolvers.lookup_style(name))
            if isinstance(outcome, Present):
                outcome = _outcome(lambda: coerce_style(outcome.value))
            self._style_outcomes[name] = outcome
        return self._style_outcomes[name]

    def _resolve_text(self, name: str, allow_meta: bool) -> Outcome:
        """Meta first, then style, then value; first claim wins"""
        key = (name, allow_meta)
        if key in self._text_outcomes:
            return self._text_outcomes[key]

        outcome = ABSENT
        if allow_meta:
            outcome = _outcome(lambda: self.resolvers.lookup_meta(name, self.context))
            if isinstance(outcome, Present):
                outcome = Present(self._meta_template(name, outcome.value))
        if outcome is ABSENT:
            outcome = self._lookup_style(name)
            if isinstance(outcome, Present):
                outcome = Present(None)
        if outcome is ABSENT:
            outcome = _outcome(lambda: self.resolvers.lookup_value(name, self.context))
            if isinstance(outcome, Present):
                outcome = Present(str(outcome.value))

        self._text_outcomes[key] = outcome
        return outcome

    def _meta_template(self, name: str, value: Any) -> Template:
        if name not in self._meta_templates:
            self._meta_templates[name] = parse(str(value))
        return self._meta_templates[name]

    def _variable(self, name: str, in_group: bool, allow_meta: bool) -> Optional[List[Segment]]:
        outcome = self._resolve_text(name, allow_meta)
        if isinstance(outcome, Failed):
            raise ResolverFailed(name, outcome.cause)
        if outcome is ABSENT:
            if not in_group:
                raise UnknownVariable(name)
            return None

        value = outcome.value
        if value is None:
            return []
        if isinstance(value, Template):
            segments, absent = self._nodes(value.nodes, in_group=in_group, allow_meta=False)
            return None if absent else segments
        return [Segment(value)]


def render(template: Template,
           resolvers: Resolvers,
           default_style: Optional[Style] = None,
           context: Any = None) -> List[Segment]:
    """
    Render a template into an ordered list of segments

    Args:
        template: Parsed format string
        resolvers: Variable lookups, consulted meta, style, value
        default_style: Style filling attributes no group sets
        context: Opaque object handed to the meta and value lookups

    Returns:
        Segments in left-to-right order, neighbours with equal style merged

    Raises:
        UnknownVariable: a variable outside any group was not claimed
        ResolverFailed: a lookup raised an exception
        ParseError: a meta value is not a valid format string
    """
    return _Renderer(resolvers, context).render(template, default_style)
