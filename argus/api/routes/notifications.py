"""Notification inbox routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from argus.api.dependencies.workflow import get_notification_inbox_service
from argus.api.models.errors import WorkflowErrorResponse
from argus.api.models.notification import (
    NotificationListResponse,
    NotificationResponse,
)
from argus.api.routes.results import FAILED_STATUS, unavailable
from argus.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from argus.domain.errors.persistence import PersistenceError

router = APIRouter(prefix="/v1/notifications", tags=["notifications"])

_INBOX_RESPONSES = {
    404: {"model": WorkflowErrorResponse, "description": "Notification not found"},
    FAILED_STATUS: {
        "model": WorkflowErrorResponse,
        "description": "Infrastructure failure",
    },
}


def _not_found(request: Request, notification_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "type": "urn:argus:notification:not-found",
            "title": "Notification Not Found",
            "status": 404,
            "detail": f"Notification {notification_id} introuvable",
            "instance": str(request.url),
        },
    )


@router.get(
    "",
    response_model=NotificationListResponse,
    responses={FAILED_STATUS: _INBOX_RESPONSES[FAILED_STATUS]},
    summary="List a user's notifications",
)
async def list_notifications(
    request: Request,
    user_id: UUID = Query(..., description="Recipient"),
    unread_only: bool = Query(default=False),
    service: NotificationInboxService = Depends(get_notification_inbox_service),
) -> NotificationListResponse:
    try:
        notifications = await service.list_notifications(
            user_id, unread_only=unread_only
        )
    except PersistenceError:
        raise unavailable(request) from None
    return NotificationListResponse(
        notifications=[NotificationResponse.from_domain(n) for n in notifications],
        unread_count=sum(1 for n in notifications if not n.read),
    )


@router.post(
    "/{notification_id}/read",
    status_code=204,
    responses=_INBOX_RESPONSES,
    summary="Mark a notification read",
)
async def mark_notification_read(
    notification_id: UUID,
    request: Request,
    user_id: UUID = Query(...),
    service: NotificationInboxService = Depends(get_notification_inbox_service),
) -> Response:
    try:
        updated = await service.mark_as_read(notification_id, user_id)
    except PersistenceError:
        raise unavailable(request) from None
    if not updated:
        raise _not_found(request, notification_id)
    return Response(status_code=204)


@router.delete(
    "/{notification_id}",
    status_code=204,
    responses=_INBOX_RESPONSES,
    summary="Delete a notification",
)
async def delete_notification(
    notification_id: UUID,
    request: Request,
    user_id: UUID = Query(...),
    service: NotificationInboxService = Depends(get_notification_inbox_service),
) -> Response:
    try:
        deleted = await service.delete_notification(notification_id, user_id)
    except PersistenceError:
        raise unavailable(request) from None
    if not deleted:
        raise _not_found(request, notification_id)
    return Response(status_code=204)
