from base_rule import BaseRule
from node_helpers import class_name
from range_editor import replace


class ClassNameRule(BaseRule):
    """
    Makes sure `Formula` is used as superclass instead of one of the
    retired specialised formula classes.

    The message quotes names with backticks, as the other formula
    messages do:

        `ScriptFileFormula` is deprecated, use `Formula` instead
    """

    name = "FormulaAudit/ClassName"

    DEPRECATED_CLASSES = frozenset({
        "GithubGistFormula",
        "ScriptFileFormula",
        "AmazonWebServicesFormula",
    })

    def matches(self, formula_nodes):
        return formula_nodes.parent_class_node is not None

    def audit_formula(self, formula_nodes):
        parent_class_node = formula_nodes.parent_class_node

        parent_class = class_name(parent_class_node)
        if parent_class not in self.DEPRECATED_CLASSES:
            return []

        return [
            self.problem(
                f"`{parent_class}` is deprecated, use `Formula` instead",
                parent_class_node,
                replace(parent_class_node.source_range, "Formula"),
            )
        ]
