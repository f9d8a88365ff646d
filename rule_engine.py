import logging

from formula_nodes import find_formulas
from range_editor import apply_edits, select_compatible_edits


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies a collection of rules to formula summaries and collects
    their diagnostics, ordered by source position.
    """

    def __init__(self, rules):
        self.rules = rules

    def run(self, formulas):
        diagnostics = []

        for formula_nodes in formulas:
            for rule in self.rules:
                # Rules that cannot apply to this formula are skipped
                if not rule.matches(formula_nodes):
                    continue

                found = rule.audit_formula(formula_nodes) or []
                logger.debug("%s reported %d problem(s)", rule.name, len(found))
                diagnostics.extend(found)

        return sorted(diagnostics, key=lambda diagnostic: diagnostic.sort_key())

    def audit(self, root):
        return self.run(find_formulas(root))

    def correct(self, source, diagnostics):
        edits = [diagnostic.edit for diagnostic in diagnostics if diagnostic.edit is not None]
        compatible = select_compatible_edits(edits)

        skipped = len(edits) - len(compatible)
        if skipped:
            logger.warning("Skipped %d overlapping edit(s); run the audit again to apply them", skipped)

        return apply_edits(source, compatible)
