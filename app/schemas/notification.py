"""
app/schemas/notification.py

Schemas for review-outcome notifications.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TDSNotificationRequest(BaseModel):
    email: str = Field(..., min_length=3)
    name: str
    reference: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)
    comment: str = ""


class TDSNotificationResponse(BaseModel):
    success: bool
    message: str
