"""Pydantic schemas for billiard tables."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from billiards_admin.schemas.base import Amount, CamelModel
from billiards_admin.schemas.session import SessionRecord, StopSummary


class TableStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    RESERVED = "RESERVED"


class TableRecord(CamelModel):
    id: int
    name: str
    price_per_hour: Amount = Field(..., ge=0)
    status: TableStatus
    description: Optional[str] = None
    image_url: Optional[str] = None
    reservation_time: Optional[datetime] = None


class TableForm(CamelModel):
    """Payload accepted when creating or editing a table."""

    name: str
    price_per_hour: Amount = Field(..., ge=0)
    description: str = ""
    image_url: str = ""

    @field_validator("name", "description", "image_url", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Table name must not be empty")
        return value


class TableView(TableRecord):
    """A table together with the session state tracked for it."""

    current_session: Optional[SessionRecord] = None
    # Set when the active-session lookup failed during the last refresh.
    session_error: Optional[str] = None
    last_stop: Optional[StopSummary] = None
    invoice_id: Optional[int] = None
    # A start, stop or invoice request for this table is still outstanding.
    busy: bool = False
