from __future__ import annotations


class LinefishError(Exception):
    """Base class for fatal pipeline errors."""


class SchemaError(LinefishError, ValueError):
    """A required column is absent after header normalization."""


class NoValidYearsError(LinefishError, ValueError):
    """No raw row carries a 4-digit year."""


class InvariantViolation(LinefishError, RuntimeError):
    """An internal invariant of the yearly aggregate does not hold."""


class MissingYearError(InvariantViolation):
    pass


class DuplicateYearError(InvariantViolation):
    pass
