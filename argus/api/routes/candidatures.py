"""Candidature decision routes (agency side)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from argus.api.dependencies.workflow import get_candidature_workflow_service
from argus.api.models.errors import WorkflowErrorResponse
from argus.api.models.mandate import AcceptCandidatureRequest, WorkflowActionResponse
from argus.api.routes.results import to_response
from argus.application.services.candidature_workflow_service import (
    CandidatureWorkflowService,
)

router = APIRouter(prefix="/v1/candidatures", tags=["candidatures"])

_ACTION_RESPONSES = {
    409: {"model": WorkflowErrorResponse, "description": "Action rejected"},
    503: {"model": WorkflowErrorResponse, "description": "Infrastructure failure"},
}


@router.post(
    "/{candidature_id}/accept",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Accept a candidature",
)
async def accept_candidature(
    candidature_id: UUID,
    request_data: AcceptCandidatureRequest,
    request: Request,
    service: CandidatureWorkflowService = Depends(get_candidature_workflow_service),
) -> WorkflowActionResponse:
    """Accept a candidature and assign its investigator to the mandate.

    On success the body carries redirect_url for the agency UI.
    """
    result = await service.accept_candidature(
        candidature_id, request_data.mandate_id, request_data.investigator_id
    )
    return to_response(result, request)


@router.post(
    "/{candidature_id}/reject",
    response_model=WorkflowActionResponse,
    responses=_ACTION_RESPONSES,
    summary="Reject a candidature",
)
async def reject_candidature(
    candidature_id: UUID,
    request: Request,
    service: CandidatureWorkflowService = Depends(get_candidature_workflow_service),
) -> WorkflowActionResponse:
    return to_response(await service.reject_candidature(candidature_id), request)
