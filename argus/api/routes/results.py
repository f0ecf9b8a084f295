"""Translation of workflow results into HTTP responses.

- SUCCEEDED -> 200 with a WorkflowActionResponse body
- REJECTED -> 409 (or the status chosen by the route) with the reason
- FAILED -> 503 with the generic message only
"""

from fastapi import HTTPException, Request

from argus.api.models.mandate import WorkflowActionResponse
from argus.application.dtos.workflow import (
    GENERIC_FAILURE_MESSAGE,
    WorkflowActionResult,
    WorkflowOutcome,
)

REJECTED_STATUS = 409
FAILED_STATUS = 503


def unavailable(request: Request, message: str = GENERIC_FAILURE_MESSAGE) -> HTTPException:
    """Build the 503 error raised when the data store failed."""
    return HTTPException(
        status_code=FAILED_STATUS,
        detail={
            "type": "urn:argus:workflow:action-failed",
            "title": "Action Failed",
            "status": FAILED_STATUS,
            "detail": message,
            "instance": str(request.url),
            "outcome": WorkflowOutcome.FAILED.value,
        },
    )


def to_response(
    result: WorkflowActionResult,
    request: Request,
    rejected_status: int = REJECTED_STATUS,
) -> WorkflowActionResponse:
    """Return the response body for a successful action or raise.

    Raises:
        HTTPException: With an RFC 7807 body when the action did not succeed.
    """
    if result.outcome == WorkflowOutcome.SUCCEEDED:
        return WorkflowActionResponse.from_result(result)

    if result.outcome == WorkflowOutcome.REJECTED:
        raise HTTPException(
            status_code=rejected_status,
            detail={
                "type": "urn:argus:workflow:action-rejected",
                "title": "Action Rejected",
                "status": rejected_status,
                "detail": result.error,
                "instance": str(request.url),
                "outcome": result.outcome.value,
            },
        )

    raise unavailable(request, result.error or GENERIC_FAILURE_MESSAGE)
