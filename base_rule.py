from diagnostic import Diagnostic


class BaseRule:
    """
    A rule inspects one FormulaNodes summary and returns diagnostics.

    Rules keep no state between calls, so one instance can audit any
    number of formulas in any order.
    """

    name = None

    def matches(self, formula_nodes):
        return True

    def audit_formula(self, formula_nodes):
        raise NotImplementedError("audit_formula() must be implemented")

    def problem(self, message, node, edit=None):
        return Diagnostic(message=message, anchor=node.source_range, edit=edit, rule=self.name)
