"""Persistence errors raised by repository adapters.

A PersistenceError is an infrastructure failure (read/write error,
network fault to the data store). It is never a business-rule outcome
and must not be reported to end users as "invalid because rule X failed".
"""

from __future__ import annotations

from argus.domain.exceptions import ArgusError


class PersistenceError(ArgusError):
    """Raised when the persistence collaborator fails.

    Attributes:
        operation: Name of the repository operation that failed.
        table: Table/collection involved, when known.
    """

    def __init__(
        self,
        operation: str,
        detail: str = "",
        table: str | None = None,
    ) -> None:
        """Initialize persistence error.

        Args:
            operation: Repository operation name (e.g. "assign_investigator").
            detail: Underlying error description.
            table: Table/collection involved (optional).
        """
        self.operation = operation
        self.table = table
        location = f" on {table}" if table else ""
        message = f"Persistence failure during {operation}{location}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)



class DuplicateRecordError(PersistenceError):
    """Raised when a write collides with a unique constraint.

    Callers that check for an existing row before writing can still lose
    a race against a concurrent writer; this lets them tell that case
    apart from a store outage.
    """
