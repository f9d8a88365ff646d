import logging
from dataclasses import dataclass

from ast_node import SourceRange
from errors import EditConflictError, InvalidEditError


logger = logging.getLogger(__name__)

REPLACE = "replace"
REMOVE = "remove"
INSERT = "insert"

_SPACES = " \t"
_SIDES = {"left", "right", "both"}


@dataclass(frozen=True)
class Edit:
    """
    Description of one text change over the original source.

    Edits are never applied in place; a host collects them and hands the
    whole batch to apply_edits() once.
    """

    operation: str
    source_range: SourceRange
    text: str = ""


def replace(source_range, text):
    return Edit(REPLACE, source_range, text)


def remove(source_range):
    return Edit(REMOVE, source_range)


def insert(position, text):
    return Edit(INSERT, SourceRange(position, position), text)


def _directions(side):
    if side not in _SIDES:
        raise ValueError(f"Unknown side '{side}', expected one of: {', '.join(sorted(_SIDES))}")
    return side in {"left", "both"}, side in {"right", "both"}


def range_with_surrounding_space(source, source_range, side="both", newlines=True, base=0):
    """
    Widens a range over adjacent whitespace. `source` may be a slice of
    the formula text starting at absolute offset `base`.
    """
    go_left, go_right = _directions(side)
    chars = _SPACES + "\n" if newlines else _SPACES

    begin, end = source_range.begin - base, source_range.end - base
    if go_left:
        while begin > 0 and source[begin - 1] in chars:
            begin -= 1
    if go_right:
        while end < len(source) and source[end] in chars:
            end += 1
    return SourceRange(begin + base, end + base)


def range_with_surrounding_comma(source, source_range, side="both", base=0):
    go_left, go_right = _directions(side)

    begin, end = source_range.begin - base, source_range.end - base
    if go_left and begin > 0 and source[begin - 1] == ",":
        begin -= 1
    if go_right and end < len(source) and source[end] == ",":
        end += 1
    return SourceRange(begin + base, end + base)


def _ordered(edits):
    return sorted(edits, key=lambda edit: (edit.source_range.begin, edit.source_range.end))


def select_compatible_edits(edits):
    selected = []
    for edit in _ordered(edits):
        if selected and selected[-1].source_range.overlaps(edit.source_range):
            logger.debug("Dropping edit at %d..%d: overlaps an earlier edit",
                         edit.source_range.begin, edit.source_range.end)
            continue
        selected.append(edit)
    return selected


def apply_edits(source, edits):
    ordered = _ordered(edits)

    previous = None
    for edit in ordered:
        if edit.source_range.end > len(source):
            raise InvalidEditError(
                f"Edit range {edit.source_range.begin}..{edit.source_range.end} "
                f"exceeds source length {len(source)}"
            )
        if previous is not None and previous.source_range.overlaps(edit.source_range):
            raise EditConflictError(
                f"Edits at {previous.source_range.begin}..{previous.source_range.end} and "
                f"{edit.source_range.begin}..{edit.source_range.end} overlap"
            )
        previous = edit

    parts = []
    cursor = 0
    for edit in ordered:
        parts.append(source[cursor:edit.source_range.begin])
        parts.append(edit.text)
        cursor = edit.source_range.end
    parts.append(source[cursor:])
    return "".join(parts)
