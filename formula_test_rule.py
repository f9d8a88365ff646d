import re

from ast_node import SourceRange
from ast_walker import call_sites
from base_rule import BaseRule
from node_helpers import block_body, find_block, node_equals, string_content
from range_editor import range_with_surrounding_comma, range_with_surrounding_space, remove, replace


class FormulaTestRule(BaseRule):
    """
    Makes sure a formula's `test do` block contains a proper test:
    not empty, not a bare `true`, no hardcoded /usr/local paths in the
    commands it runs and no redundant exit status for shell_output.
    """

    name = "FormulaAudit/Test"

    TEST_CALLS = ("system", "shell_output", "pipe_output")
    USR_LOCAL_RE = re.compile(r"(/usr/local/(s?bin))")

    def matches(self, formula_nodes):
        return formula_nodes.body_node is not None

    def audit_formula(self, formula_nodes):
        test = find_block(formula_nodes.body_node, "test")
        if test is None:
            return []

        body = block_body(test)
        if body is None:
            return [self.problem("`test do` should not be empty", test)]

        problems = []
        if body.kind != "begin" and body.source == "true":
            problems.append(self.problem("`test do` should contain a real test", body))

        for call in call_sites(body, self.TEST_CALLS):
            p1 = call.argument(0)
            p2 = call.argument(1)

            match = self.USR_LOCAL_RE.search(string_content(p1))
            if match:
                problems.append(
                    self.problem(
                        f"Use `#{{{match.group(2)}}}` instead of `{match.group(1)}` in `{call.selector}`",
                        p1,
                        self._interpolate(p1, match),
                    )
                )

            if call.selector == "shell_output" and node_equals(p2, 0):
                problems.append(
                    self.problem(
                        "Passing 0 to `shell_output` is redundant",
                        p2,
                        self._remove_argument(formula_nodes.class_node, p2),
                    )
                )

        return problems

    def _interpolate(self, node, match):
        offset = node.source.find(match.group(1))
        if offset < 0:
            return None
        begin = node.source_range.begin + offset
        return replace(SourceRange(begin, begin + len(match.group(1))), f"#{{{match.group(2)}}}")

    def _remove_argument(self, class_node, node):
        source, base = class_node.source, class_node.source_range.begin
        widened = range_with_surrounding_space(source, node.source_range, side="left", base=base)
        widened = range_with_surrounding_comma(source, widened, side="left", base=base)
        return remove(widened)
