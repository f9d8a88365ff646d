from ast_walker import search_nodes
from errors import NodeContractError


_LITERAL_KINDS = {"int", "float", "str", "sym", "true", "false", "nil"}
_KEYWORD_VALUES = {"true": True, "false": False, "nil": None}


def class_name(node):
    """
    Renders a constant reference such as `Formula` or `Homebrew::Formula`
    as a bare string. Returns None when there is no reference at all.
    """
    if node is None:
        return None
    if node.kind != "const":
        raise NodeContractError(f"Expected a constant reference, got '{node.kind}'")

    scope = node.children[0] if node.children else None
    if scope is None:
        return node.value
    if scope.kind == "cbase":
        return f"::{node.value}"
    return f"{class_name(scope)}::{node.value}"


def statements(body):
    if body is None:
        return ()
    if body.kind == "begin":
        return tuple(body.child_nodes())
    return (body,)


def block_call(block):
    if block is None or block.kind != "block" or not block.children:
        return None
    return block.children[0]


def block_body(block):
    if len(block.children) < 3:
        return None
    return block.children[2]


def find_block(body, name):
    for statement in statements(body):
        call = block_call(statement)
        if call is not None and call.kind == "send" and call.value == name:
            return statement
    return None


def find_node_method_by_name(node, name):
    if node is None:
        return False
    return any(search_nodes(node, lambda n: n.kind == "send" and n.value == name))


def string_content(node):
    if node is None:
        return ""
    if node.kind == "str":
        return node.value or ""
    if node.kind == "dstr":
        return "".join(child.value or "" for child in node.child_nodes() if child.kind == "str")
    return ""


def node_equals(node, value):
    if node is None or node.kind not in _LITERAL_KINDS:
        return False
    if node.kind in _KEYWORD_VALUES:
        return _KEYWORD_VALUES[node.kind] is value
    # 0 == False and 0 == 0.0 in Python, but not as formula literals
    return type(node.value) is type(value) and node.value == value
