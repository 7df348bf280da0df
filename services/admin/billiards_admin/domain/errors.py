"""Error types raised by the table session and catalog services."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    INVALID_INTERVAL = "INVALID_INTERVAL"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVOICE_CREATION_FAILED = "INVOICE_CREATION_FAILED"
    UPSTREAM_REQUEST_FAILED = "UPSTREAM_REQUEST_FAILED"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    INVALID_TABLE_STATE = "INVALID_TABLE_STATE"
    OPERATION_IN_PROGRESS = "OPERATION_IN_PROGRESS"


class BilliardsAdminError(Exception):
    """Base error carrying a code and a message that is safe to show users."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInterval(BilliardsAdminError):
    """Raised when a session ends before it starts."""

    code = ErrorCode.INVALID_INTERVAL


class SessionNotFound(BilliardsAdminError):
    """Raised when no tracked session matches the requested operation."""

    code = ErrorCode.SESSION_NOT_FOUND


class InvoiceCreationFailed(BilliardsAdminError):
    code = ErrorCode.INVOICE_CREATION_FAILED


class UpstreamRequestFailed(BilliardsAdminError):
    """Raised when the POS API cannot be reached or answers with an error."""

    code = ErrorCode.UPSTREAM_REQUEST_FAILED

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class TableNotFound(BilliardsAdminError):
    code = ErrorCode.TABLE_NOT_FOUND


class InvalidTableState(BilliardsAdminError):
    """Raised when a transition is not allowed from the table's current status."""

    code = ErrorCode.INVALID_TABLE_STATE


class OperationInProgress(BilliardsAdminError):
    """Raised when a table already has a start/stop/invoice request outstanding."""

    code = ErrorCode.OPERATION_IN_PROGRESS


__all__ = [
    "BilliardsAdminError",
    "ErrorCode",
    "InvalidInterval",
    "InvalidTableState",
    "InvoiceCreationFailed",
    "OperationInProgress",
    "SessionNotFound",
    "TableNotFound",
    "UpstreamRequestFailed",
]
