from billiards_admin.domain.errors import (
    BilliardsAdminError,
    ErrorCode,
    InvalidInterval,
    InvalidTableState,
    InvoiceCreationFailed,
    OperationInProgress,
    SessionNotFound,
    TableNotFound,
    UpstreamRequestFailed,
)
from billiards_admin.domain.money import Money

__all__ = [
    "BilliardsAdminError",
    "ErrorCode",
    "InvalidInterval",
    "InvalidTableState",
    "InvoiceCreationFailed",
    "Money",
    "OperationInProgress",
    "SessionNotFound",
    "TableNotFound",
    "UpstreamRequestFailed",
]
