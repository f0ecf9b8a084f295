"""Failure injection shared by the in-memory repository stubs."""

from __future__ import annotations

from argus.domain.errors.persistence import PersistenceError

ALL_OPERATIONS = "*"


class FailureInjectionMixin:
    """Lets tests make individual repository operations raise PersistenceError.

    Usage:
        repo.set_should_fail("assign_investigator")
        repo.set_should_fail(ALL_OPERATIONS)
        repo.set_should_fail("assign_investigator", False)
    """

    _table: str
    _failing_operations: dict[str, str]

    def _init_failures(self, table: str) -> None:
        self._table = table
        self._failing_operations = {}

    def set_should_fail(
        self,
        operation: str,
        should_fail: bool = True,
        message: str = "Simulated persistence failure",
    ) -> None:
        """Configure whether an operation (or "*" for all) raises."""
        if should_fail:
            self._failing_operations[operation] = message
        else:
            self._failing_operations.pop(operation, None)

    def reset_failures(self) -> None:
        """Stop injecting failures."""
        self._failing_operations.clear()

    def _check_failure(self, operation: str) -> None:
        message = self._failing_operations.get(
            operation, self._failing_operations.get(ALL_OPERATIONS)
        )
        if message is not None:
            raise PersistenceError(operation, message, table=self._table)
