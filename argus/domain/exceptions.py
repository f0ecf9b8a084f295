"""Base exception classes for the Argus domain layer."""


class ArgusError(Exception):
    """Base exception for all domain errors.

    Business-rule violations are NOT exceptions in this codebase: they are
    returned as ValidationResult values. Subclasses of ArgusError signal
    faults the caller cannot fix by changing its input.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
