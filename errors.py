"""Exception hierarchy for formula auditing."""


class FormulaAuditError(Exception):
    """Base class for every error raised by the audit engine."""


class NodeContractError(FormulaAuditError, TypeError):
    """Raised when a node of an unexpected kind or shape is handed in."""


class InvalidEditError(FormulaAuditError, ValueError):
    """Raised when an edit cannot be applied to the given source."""


class EditConflictError(InvalidEditError):
    """Raised when two edits touch overlapping source ranges."""
