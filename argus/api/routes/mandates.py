"""Mandate workflow routes.

Agency-side actions on a mandate: creation, status changes, unassigning
the investigator and rating. Investigators apply through the
candidatures sub-resource.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from argus.api.dependencies.workflow import (
    get_candidature_workflow_service,
    get_mandate_lifecycle_service,
    get_mandate_rating_service,
)
from argus.api.models.errors import WorkflowErrorResponse
from argus.api.models.mandate import (
    CandidatureListResponse,
    CandidatureResponse,
    CreateMandateRequest,
    MandateListResponse,
    MandateResponse,
    RateMandateRequest,
    SubmitCandidatureRequest,
    WorkflowActionResponse,
)
from argus.api.routes.results import to_response, unavailable
from argus.application.services.candidature_workflow_service import (
    CandidatureWorkflowService,
)
from argus.application.services.mandate_lifecycle_service import (
    MandateLifecycleService,
)
from argus.application.services.mandate_rating_service import MandateRatingService
from argus.domain.errors.persistence import PersistenceError
from argus.domain.models.candidature import CandidatureStatus
from argus.domain.models.mandate import MandateStatus

router = APIRouter(prefix="/v1/mandates", tags=["mandates"])

_ACTION_RESPONSES = {
    409: {"model": WorkflowErrorResponse, "description": "Action rejected"},
    503: {"model": WorkflowErrorResponse, "description": "Infrastructure failure"},
}


@router.get(
    "",
    response_model=MandateListResponse,
    responses={503: _ACTION_RESPONSES[503]},
    summary="List an agency's mandates",
)
async def list_mandates(
    request: Request,
    agency_id: UUID = Query(..., description="Posting agency"),
    status: MandateStatus | None = Query(default=None),
    service: MandateLifecycleService = Depends(get_mandate_lifecycle_service),
) -> MandateListResponse:
    try:
        mandates = await service.list_agency_mandates(agency_id, status)
    except PersistenceError:
        raise unavailable(request) from None
    return MandateListResponse(
        mandates=[MandateResponse.from_domain(m) for m in mandates],
        total=len(mandates),
    )


@router.post(
    "",
    response_model=WorkflowActionResponse,
    status_code=201,
    responses={
        422: {"model": WorkflowErrorResponse, "description": "Invalid mandate"},
        503: _ACTION_RESPONSES[503],
    },
    summary="Create a mandate",
)
async def create_mandate(
    request_data: CreateMandateRequest,
    request: Request,
    service: MandateLifecycleService = Depends(get_mandate_lifecycle_service),
) -> WorkflowActionResponse:
    """Create a public (OPEN) or direct (IN_PROGRESS) mandate."""
    result = await service.create_mandate(request_data.to_draft())
    return to_response(result, request, rejected_status=422)


@router.post(
    "/{mandate_id}/complete",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Mark a mandate completed",
)
async def complete_mandate(
    mandate_id: UUID,
    request: Request,
    service: MandateLifecycleService = Depends(get_mandate_lifecycle_service),
) -> WorkflowActionResponse:
    return to_response(await service.complete_mandate(mandate_id), request)


@router.post(
    "/{mandate_id}/reopen",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Reopen a completed mandate",
)
async def reopen_mandate(
    mandate_id: UUID,
    request: Request,
    service: MandateLifecycleService = Depends(get_mandate_lifecycle_service),
) -> WorkflowActionResponse:
    return to_response(await service.reopen_mandate(mandate_id), request)


@router.post(
    "/{mandate_id}/cancel",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Cancel a mandate",
)
async def cancel_mandate(
    mandate_id: UUID,
    request: Request,
    service: MandateLifecycleService = Depends(get_mandate_lifecycle_service),
) -> WorkflowActionResponse:
    return to_response(await service.cancel_mandate(mandate_id), request)


@router.post(
    "/{mandate_id}/unassign",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Remove the assigned investigator",
)
async def unassign_investigator(
    mandate_id: UUID,
    request: Request,
    service: CandidatureWorkflowService = Depends(get_candidature_workflow_service),
) -> WorkflowActionResponse:
    """Put an in-progress mandate back to OPEN and notify the investigator."""
    return to_response(await service.unassign_investigator(mandate_id), request)


@router.get(
    "/{mandate_id}/candidatures",
    response_model=CandidatureListResponse,
    responses={503: _ACTION_RESPONSES[503]},
    summary="List the candidatures of a mandate",
)
async def list_candidatures(
    mandate_id: UUID,
    request: Request,
    status: CandidatureStatus | None = Query(default=None),
    service: CandidatureWorkflowService = Depends(get_candidature_workflow_service),
) -> CandidatureListResponse:
    try:
        candidatures = await service.list_candidatures(mandate_id, status)
    except PersistenceError:
        raise unavailable(request) from None
    return CandidatureListResponse(
        candidatures=[CandidatureResponse.from_domain(c) for c in candidatures],
        total=len(candidatures),
    )


@router.post(
    "/{mandate_id}/candidatures",
    response_model=WorkflowActionResponse,
    status_code=201,
    responses=_ACTION_RESPONSES,
    summary="Apply to a public mandate",
)
async def submit_candidature(
    mandate_id: UUID,
    request_data: SubmitCandidatureRequest,
    request: Request,
    service: CandidatureWorkflowService = Depends(get_candidature_workflow_service),
) -> WorkflowActionResponse:
    result = await service.submit_candidature(mandate_id, request_data.investigator_id)
    return to_response(result, request)


@router.post(
    "/{mandate_id}/rating",
    response_model=WorkflowActionResponse,
    status_code=201,
    responses=_ACTION_RESPONSES,
    summary="Rate the investigator of a completed mandate",
)
async def rate_mandate(
    mandate_id: UUID,
    request_data: RateMandateRequest,
    request: Request,
    service: MandateRatingService = Depends(get_mandate_rating_service),
) -> WorkflowActionResponse:
    result = await service.rate_mandate(
        mandate_id,
        request_data.agency_id,
        request_data.rating,
        comment=request_data.comment,
        on_time=request_data.on_time,
    )
    return to_response(result, request)
