from __future__ import annotations

from app.services.notification_service import (
    NOTIFICATION_LOGGED_MESSAGE,
    NotificationService,
    build_notification,
)


def test_subject_and_body_with_comment() -> None:
    message = build_notification(
        email="sam@example.org",
        name="Sam",
        reference="TDS-0042",
        status="Approved",
        comment="Lashing points verified.",
    )

    assert message.to == "sam@example.org"
    assert message.subject == "TDS Request TDS-0042 - Approved"
    assert message.body.startswith("Dear Sam,\n\n")
    assert "Your TDS request (TDS-0042) has been approved by the TDS Review Team." in message.body
    assert "Comments:\nLashing points verified.\n\n" in message.body
    assert message.body.endswith("MOD TDS Team\nJSP 800 Vol 7 Portal")


def test_comment_block_omitted_when_blank() -> None:
    message = build_notification(
        email="sam@example.org",
        name="Sam",
        reference="TDS-0042",
        status="Rejected",
    )

    assert "Comments:" not in message.body
    assert "has been rejected" in message.body


def test_send_logs_and_reports_pending_transport(caplog) -> None:
    message = build_notification(email="a@b.org", name="A", reference="R1", status="Approved")

    with caplog.at_level("INFO", logger="app.services.notification_service"):
        result = NotificationService().send(message)

    assert result == NOTIFICATION_LOGGED_MESSAGE
    assert "tds_notification_prepared" in caplog.text
