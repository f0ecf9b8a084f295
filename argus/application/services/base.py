"""Service logging mixin.

Usage:
    class MandateLifecycleService(LoggingMixin):
        def __init__(self, mandates: MandateRepositoryProtocol) -> None:
            self._mandates = mandates
            self._init_logger(component="workflow")

        async def complete_mandate(self, mandate_id: UUID) -> WorkflowActionResult:
            log = self._log_operation("complete_mandate", mandate_id=str(mandate_id))
            log.info("mandate_completion_requested")
"""

import structlog

from argus.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with the service class name and a component tag.
    Each operation additionally binds its name and the current
    correlation id.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "workflow") -> None:
        """Initialize the logger. Call at the end of __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger carrying the correlation id."""
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
