"""
app/services/notification_service.py

Review-outcome notifications for TDS requests.

Messages are composed and logged only; no mail transport is wired in yet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from app.logging_utils import log_event

logger = logging.getLogger(__name__)

NOTIFICATION_LOGGED_MESSAGE = "Notification logged (email service to be configured)"


@dataclass(frozen=True)
class NotificationMessage:
    to: str
    subject: str
    body: str


def build_notification(
    *,
    email: str,
    name: str,
    reference: str,
    status: str,
    comment: str = "",
) -> NotificationMessage:
    comment_block = f"Comments:\n{comment}\n\n" if comment else ""
    body = (
        f"Dear {name},\n\n"
        f"Your TDS request ({reference}) has been {status.lower()} by the TDS Review Team.\n\n"
        f"{comment_block}"
        "Kind regards,\n"
        "MOD TDS Team\n"
        "JSP 800 Vol 7 Portal"
    )
    return NotificationMessage(
        to=email,
        subject=f"TDS Request {reference} - {status}",
        body=body,
    )


class NotificationService:
    def send(self, message: NotificationMessage) -> str:
        log_event(
            logger,
            logging.INFO,
            "tds_notification_prepared",
            to=message.to,
            subject=message.subject,
            preview=message.body[:100],
        )
        return NOTIFICATION_LOGGED_MESSAGE


@lru_cache(maxsize=1)
def get_notification_service() -> NotificationService:
    return NotificationService()
