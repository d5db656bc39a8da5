"""
app/api/routers/notifications.py

Review-outcome notification endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.dependencies import json_payload
from app.schemas.notification import TDSNotificationRequest, TDSNotificationResponse
from app.services.notification_service import (
    NotificationService,
    build_notification,
    get_notification_service,
)

router = APIRouter(tags=["notifications"])


@router.post("/send-tds-notification", response_model=TDSNotificationResponse)
def send_tds_notification(
    payload: TDSNotificationRequest = Depends(json_payload(TDSNotificationRequest)),
    notification_service: NotificationService = Depends(get_notification_service),
) -> TDSNotificationResponse:
    message = build_notification(
        email=payload.email,
        name=payload.name,
        reference=payload.reference,
        status=payload.status,
        comment=payload.comment,
    )
    return TDSNotificationResponse(success=True, message=notification_service.send(message))
