"""Health check response model."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: Health status ("healthy").
    """

    status: str
