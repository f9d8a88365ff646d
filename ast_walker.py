from dataclasses import dataclass
from typing import Tuple

from ast_node import Node


def walk_ast(node):
    """
    Lazily walks a formula tree depth-first, yielding nodes in source order.

    Uses an explicit stack so deeply nested formulas never hit the
    interpreter's recursion limit. Empty child slots are skipped.
    """
    if node is None:
        return

    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.child_nodes())))


def search_nodes(node, predicate):
    for candidate in walk_ast(node):
        if predicate(candidate):
            yield candidate


@dataclass(frozen=True)
class CallSite:
    """
    A receiver-less call `selector(arg1, arg2, ...)` found in a tree.
    """

    node: Node
    selector: str
    arguments: Tuple[Node, ...]

    def argument(self, index):
        if index < len(self.arguments):
            return self.arguments[index]
        return None


def is_call(node, selectors=None):
    if node.kind != "send" or not node.children or node.children[0] is not None:
        return False
    return selectors is None or node.value in selectors


def call_sites(node, selectors):
    selectors = frozenset(selectors)
    for call in search_nodes(node, lambda n: is_call(n, selectors)):
        yield CallSite(
            node=call,
            selector=call.value,
            arguments=tuple(arg for arg in call.children[1:] if arg is not None),
        )
