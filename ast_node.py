from dataclasses import dataclass
from typing import Any, Optional, Tuple

from errors import NodeContractError


@dataclass(frozen=True)
class SourceRange:
    """
    Half-open span [begin, end) of offsets into a formula's source text.
    """

    begin: int
    end: int

    def __post_init__(self):
        if self.begin < 0 or self.end < self.begin:
            raise ValueError(f"Invalid source range: {self.begin}..{self.end}")

    @property
    def is_empty(self):
        return self.begin == self.end

    def overlaps(self, other):
        """
        True when two edits over these ranges cannot both be applied: they
        share a character, or one is an insertion point strictly inside
        the other. Insertions at a boundary or at the same point do not
        overlap.
        """
        if self.is_empty and other.is_empty:
            return False
        if self.is_empty:
            return other.begin < self.begin < other.end
        if other.is_empty:
            return self.begin < other.begin < self.end
        return self.begin < other.end and other.begin < self.end


@dataclass(frozen=True)
class Node:
    """
    Immutable element of a parsed formula tree.

    Optional child slots (a class without superclass, a block without
    body, a call without receiver) hold None so positions stay fixed.
    """

    kind: str
    children: Tuple[Optional["Node"], ...]
    source_range: SourceRange
    source: str
    value: Any = None

    def __str__(self):
        return self.source

    def child_nodes(self):
        for child in self.children:
            if child is not None:
                yield child

    def same_shape(self, other):
        # Pairs are compared from an explicit stack; trees can be very deep
        pairs = [(self, other)]
        while pairs:
            mine, theirs = pairs.pop()
            if mine is None or theirs is None:
                if mine is not theirs:
                    return False
                continue
            if not isinstance(theirs, Node):
                return False
            if mine.kind != theirs.kind or mine.value != theirs.value:
                return False
            if len(mine.children) != len(theirs.children):
                return False
            pairs.extend(zip(mine.children, theirs.children))
        return True

    def search(self, predicate):
        from ast_walker import search_nodes

        return search_nodes(self, predicate)


def _checked(data, source):
    if not isinstance(data, dict):
        raise NodeContractError(f"Expected a node mapping, got {type(data).__name__}")

    kind = data.get("type")
    span = data.get("range")
    if not kind or not isinstance(span, (list, tuple)) or len(span) != 2:
        raise NodeContractError(f"Node mapping needs 'type' and a [begin, end] 'range': {data!r}")

    begin, end = span
    if not all(isinstance(offset, int) and not isinstance(offset, bool) for offset in (begin, end)):
        raise NodeContractError(f"Range of '{kind}' must hold integer offsets, got {span!r}")
    if not (0 <= begin <= end <= len(source)):
        raise NodeContractError(f"Range {begin}..{end} of '{kind}' lies outside the source")

    children = data.get("children", [])
    if not isinstance(children, (list, tuple)):
        raise NodeContractError(f"Children of '{kind}' must be a list, got {type(children).__name__}")
    return kind, SourceRange(begin, end), children


def node_from_dict(data, source):
    """
    Builds a Node tree from the nested dicts a host parser emits:

        {"type": "send", "range": [4, 17], "value": "system",
         "children": [null, {...}]}

    Children are built before their parents from an explicit stack, so
    arbitrarily deep dumps convert without recursion.
    """
    built = {}
    stack = [(data, None)]
    while stack:
        current, checked = stack.pop()
        if checked is None:
            checked = _checked(current, source)
            stack.append((current, checked))
            for child in reversed(checked[2]):
                if child is not None:
                    stack.append((child, None))
            continue

        kind, source_range, children = checked
        built[id(current)] = Node(
            kind=kind,
            children=tuple(None if child is None else built[id(child)] for child in children),
            source_range=source_range,
            source=source[source_range.begin:source_range.end],
            value=current.get("value"),
        )

    return built[id(data)]
