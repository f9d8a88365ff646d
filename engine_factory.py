import logging

from rule_engine import RuleEngine

from class_name_rule import ClassNameRule
from formula_test_rule import FormulaTestRule
from formula_test_present_rule import FormulaTestPresentRule


logger = logging.getLogger(__name__)

ALL_RULE_GROUPS = {"audit", "strict"}


def _normalized_groups(enabled_groups):
    if enabled_groups is None:
        return set(ALL_RULE_GROUPS)

    unknown = sorted(set(enabled_groups) - ALL_RULE_GROUPS)
    if unknown:
        logger.warning(
            "Ignoring unknown rule group(s): %s. Valid groups: %s.",
            ", ".join(unknown),
            ", ".join(sorted(ALL_RULE_GROUPS)),
        )
    return {g for g in enabled_groups if g in ALL_RULE_GROUPS}


def build_engine(enabled_groups=None):
    groups = _normalized_groups(enabled_groups)
    rules = []

    if "audit" in groups:
        rules.extend(
            [
                ClassNameRule(),
                FormulaTestRule(),
            ]
        )

    if "strict" in groups:
        rules.append(FormulaTestPresentRule())

    return RuleEngine(rules)
