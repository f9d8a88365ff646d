from dataclasses import dataclass
from typing import Optional

from ast_node import Node
from ast_walker import search_nodes
from errors import NodeContractError
from node_helpers import class_name


FORMULA_CLASS_NAMES = {
    "Formula",
    "GithubGistFormula",
    "ScriptFileFormula",
    "AmazonWebServicesFormula",
}


@dataclass(frozen=True)
class FormulaNodes:
    """
    Structural summary of one formula class, handed to every rule.
    """

    class_node: Node
    parent_class_node: Optional[Node]
    body_node: Optional[Node]

    @classmethod
    def from_class_node(cls, node):
        if node is None or node.kind != "class":
            kind = node.kind if node is not None else None
            raise NodeContractError(f"Expected a class node, got '{kind}'")

        slots = list(node.children) + [None] * (3 - len(node.children))
        _name, parent_class_node, body_node = slots[:3]
        return cls(class_node=node, parent_class_node=parent_class_node, body_node=body_node)


def formula_class(node):
    if node.kind != "class" or len(node.children) < 2:
        return False
    parent = node.children[1]
    if parent is None or parent.kind != "const":
        return False
    return class_name(parent) in FORMULA_CLASS_NAMES


def find_formulas(root):
    for node in search_nodes(root, formula_class):
        yield FormulaNodes.from_class_node(node)
