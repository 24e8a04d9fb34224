"""
Data models for the access log.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccessLogEntry(BaseModel):
    """
    One successful resolution of a short identifier.

    Appended on every redirect, immutable afterwards.
    """

    short_url_id: str = Field(..., description="The short identifier that was resolved")
    access_time: datetime = Field(default_factory=utcnow, description="When the access happened (UTC)")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "short_url_id": "3xK9aZ",
                "access_time": "2025-10-29T10:30:00+00:00",
            }
        },
    )
