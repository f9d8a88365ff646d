from dataclasses import dataclass
from typing import Optional

from ast_node import SourceRange
from range_editor import Edit


@dataclass(frozen=True)
class Diagnostic:
    """
    One reported problem, anchored at the offending source range.
    """

    message: str
    anchor: SourceRange
    edit: Optional[Edit] = None
    rule: Optional[str] = None

    def sort_key(self):
        return (self.anchor.begin, self.anchor.end, self.message)
