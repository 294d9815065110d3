"""Exceptions raised by the mortgage calculator engine."""


class InvalidInputError(ValueError):
    """Raised when calculation inputs cannot produce a meaningful result.

    Subclasses ``ValueError`` so callers that already guard numeric parsing
    with ``except ValueError`` keep working.
    """
