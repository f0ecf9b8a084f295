"""Mandate and candidature API models.

Application DTOs and domain models are converted here to Pydantic
responses; routes never serialize domain objects directly.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from argus.application.dtos.workflow import MandateDraftDTO, WorkflowActionResult
from argus.domain.models.candidature import Candidature, CandidatureStatus
from argus.domain.models.mandate import (
    AssignmentType,
    Mandate,
    MandateLocation,
    MandatePriority,
    MandateStatus,
)
from argus.domain.models.rating import MAX_RATING, MIN_RATING, MandateRating


class MandateLocationModel(BaseModel):
    """Where the work takes place."""

    city: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1, max_length=10)
    latitude: float = 0.0
    longitude: float = 0.0


class CreateMandateRequest(BaseModel):
    """Request body for POST /v1/mandates."""

    agency_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, description="Kind of investigation")
    description: str = Field(..., min_length=1)
    location: MandateLocationModel
    date_required: datetime
    duration: str = Field(..., min_length=1)
    priority: MandatePriority = MandatePriority.NORMAL
    assignment_type: AssignmentType = AssignmentType.PUBLIC
    assigned_to: UUID | None = None
    budget: str | None = None

    def to_draft(self) -> MandateDraftDTO:
        return MandateDraftDTO(
            agency_id=self.agency_id,
            title=self.title,
            mandate_type=self.type,
            description=self.description,
            location=MandateLocation(
                city=self.location.city,
                region=self.location.region,
                postal_code=self.location.postal_code,
                latitude=self.location.latitude,
                longitude=self.location.longitude,
            ),
            date_required=self.date_required,
            duration=self.duration,
            priority=self.priority,
            assignment_type=self.assignment_type,
            assigned_to=self.assigned_to,
            budget=self.budget,
        )


class AcceptCandidatureRequest(BaseModel):
    """Request body for POST /v1/candidatures/{id}/accept."""

    mandate_id: UUID
    investigator_id: UUID


class SubmitCandidatureRequest(BaseModel):
    """Request body for POST /v1/mandates/{id}/candidatures."""

    investigator_id: UUID


class RateMandateRequest(BaseModel):
    """Request body for POST /v1/mandates/{id}/rating."""

    agency_id: UUID
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str | None = Field(default=None, max_length=2000)
    on_time: bool | None = None


class MandateResponse(BaseModel):
    """Mandate as returned by the API."""

    id: UUID
    agency_id: UUID
    title: str
    type: str
    description: str
    location: MandateLocationModel
    date_required: datetime | None
    duration: str
    priority: MandatePriority
    assignment_type: AssignmentType
    status: MandateStatus
    assigned_to: UUID | None
    budget: str | None
    created_at: datetime
    updated_at: datetime | None
    completed_at: datetime | None

    @classmethod
    def from_domain(cls, mandate: Mandate) -> MandateResponse:
        return cls(
            id=mandate.id,
            agency_id=mandate.agency_id,
            title=mandate.title,
            type=mandate.mandate_type,
            description=mandate.description,
            location=MandateLocationModel(
                city=mandate.location.city,
                region=mandate.location.region,
                postal_code=mandate.location.postal_code,
                latitude=mandate.location.latitude,
                longitude=mandate.location.longitude,
            ),
            date_required=mandate.date_required,
            duration=mandate.duration,
            priority=mandate.priority,
            assignment_type=mandate.assignment_type,
            status=mandate.status,
            assigned_to=mandate.assigned_to,
            budget=mandate.budget,
            created_at=mandate.created_at,
            updated_at=mandate.updated_at,
            completed_at=mandate.completed_at,
        )


class CandidatureResponse(BaseModel):
    """Candidature as returned by the API."""

    id: UUID
    mandate_id: UUID
    investigator_id: UUID
    status: CandidatureStatus
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_domain(cls, candidature: Candidature) -> CandidatureResponse:
        return cls(
            id=candidature.id,
            mandate_id=candidature.mandate_id,
            investigator_id=candidature.investigator_id,
            status=candidature.status,
            created_at=candidature.created_at,
            updated_at=candidature.updated_at,
        )


class RatingResponse(BaseModel):
    """Mandate rating as returned by the API."""

    id: UUID
    mandate_id: UUID
    investigator_id: UUID
    agency_id: UUID
    rating: int
    comment: str | None
    on_time: bool | None
    created_at: datetime

    @classmethod
    def from_domain(cls, rating: MandateRating) -> RatingResponse:
        return cls(
            id=rating.id,
            mandate_id=rating.mandate_id,
            investigator_id=rating.investigator_id,
            agency_id=rating.agency_id,
            rating=rating.rating,
            comment=rating.comment,
            on_time=rating.on_time,
            created_at=rating.created_at,
        )


class WorkflowActionResponse(BaseModel):
    """Successful workflow action."""

    outcome: str
    mandate: MandateResponse | None = None
    candidature: CandidatureResponse | None = None
    rating: RatingResponse | None = None
    redirect_url: str | None = None

    @classmethod
    def from_result(cls, result: WorkflowActionResult) -> WorkflowActionResponse:
        return cls(
            outcome=result.outcome.value,
            mandate=MandateResponse.from_domain(result.mandate) if result.mandate else None,
            candidature=(
                CandidatureResponse.from_domain(result.candidature)
                if result.candidature
                else None
            ),
            rating=RatingResponse.from_domain(result.rating) if result.rating else None,
            redirect_url=result.redirect_url,
        )


class MandateListResponse(BaseModel):
    """An agency's mandates, newest first."""

    mandates: list[MandateResponse]
    total: int


class CandidatureListResponse(BaseModel):
    """Candidatures of a mandate, oldest first."""

    candidatures: list[CandidatureResponse]
    total: int
