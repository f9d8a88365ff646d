from base_rule import BaseRule
from node_helpers import find_block, find_node_method_by_name


class FormulaTestPresentRule(BaseRule):
    """
    Makes sure every formula that is not disabled ships a `test do` block.
    """

    name = "FormulaAuditStrict/TestPresent"

    def audit_formula(self, formula_nodes):
        body_node = formula_nodes.body_node
        if find_block(body_node, "test") is not None:
            return []
        if find_node_method_by_name(body_node, "disable!"):
            return []

        anchor = formula_nodes.class_node if body_node is None else body_node
        return [self.problem("A `test do` test block should be added", anchor)]
