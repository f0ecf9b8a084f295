"""RFC 7807 style error body shared by the workflow routes."""

from pydantic import BaseModel, Field


class WorkflowErrorResponse(BaseModel):
    """Problem details returned for rejected or failed workflow actions.

    Attributes:
        type: Problem type URN.
        title: Short summary.
        status: HTTP status code.
        detail: User-facing message (French).
        instance: Request URL.
        outcome: Workflow outcome ("rejected" or "failed").
    """

    type: str = Field(..., description="Problem type URN")
    title: str
    status: int
    detail: str
    instance: str
    outcome: str
