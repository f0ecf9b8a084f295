"""Domain errors for Argus.

All exceptions inherit from ArgusError.
"""

from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError

__all__: list[str] = ["DuplicateRecordError", "PersistenceError"]
