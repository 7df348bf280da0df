"""Pydantic schemas for table sessions."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from billiards_admin.schemas.base import Amount, CamelModel


class SessionRecord(CamelModel):
    """One occupancy period of a table as reported by the POS API."""

    id: int
    table_id: Optional[int] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    total: Optional[Amount] = Field(None, ge=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # The POS API may send local timestamps without an offset.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _validate_interval(self) -> "SessionRecord":
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("endTime must not be earlier than startTime")
        return self

    @property
    def is_active(self) -> bool:
        return self.end_time is None


class StopSummary(CamelModel):
    """Human-readable outcome of closing a session."""

    table_id: int
    session_id: int
    start_time: datetime
    end_time: datetime
    duration_minutes: int
    duration_display: str
    # Confirmed amount from the POS API; absent when the server did not price the session.
    total: Optional[Amount] = None
    computed_total: Amount
    total_display: str


class SessionInvoice(CamelModel):
    session_id: int
    invoice_id: int
