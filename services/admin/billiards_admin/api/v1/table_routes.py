"""API routes for tables and their sessions."""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from billiards_admin.dependencies import get_table_service, get_table_sessions
from billiards_admin.schemas.session import SessionInvoice, StopSummary
from billiards_admin.schemas.table import TableForm, TableView
from billiards_admin.services.table_service import TableService
from billiards_admin.services.table_session_service import TableSessionService

router = APIRouter(tags=["tables"])


@router.get("/tables", response_model=List[TableView])
async def list_tables(
    *,
    sessions: TableSessionService = Depends(get_table_sessions),
    refresh: bool = Query(True, description="Reload tables and sessions from the POS API"),
) -> List[TableView]:
    """List tables with the active session of every occupied one."""

    if refresh:
        return await sessions.refresh()
    return sessions.list_tables()


@router.get("/tables/{table_id}", response_model=TableView)
async def get_table(
    table_id: int,
    sessions: TableSessionService = Depends(get_table_sessions),
) -> TableView:
    return sessions.get_table(table_id)


@router.post("/tables", response_model=List[TableView], status_code=status.HTTP_201_CREATED)
async def create_table(
    payload: TableForm,
    service: TableService = Depends(get_table_service),
) -> List[TableView]:
    """Create a table and return the reloaded table list."""

    return await service.create_table(payload)


@router.put("/tables/{table_id}", response_model=List[TableView])
async def update_table(
    table_id: int,
    payload: TableForm,
    service: TableService = Depends(get_table_service),
) -> List[TableView]:
    """Edit a table and return the reloaded table list."""

    return await service.update_table(table_id, payload)


@router.post("/tables/{table_id}/start", response_model=TableView)
async def start_session(
    table_id: int,
    sessions: TableSessionService = Depends(get_table_sessions),
) -> TableView:
    """Start timing a table."""

    return await sessions.start(table_id)


@router.post("/tables/{table_id}/stop", response_model=StopSummary)
async def stop_session(
    table_id: int,
    sessions: TableSessionService = Depends(get_table_sessions),
) -> StopSummary:
    """Stop timing a table and report the played time and amount due."""

    return await sessions.stop(table_id)


@router.post(
    "/sessions/{session_id}/invoice",
    response_model=SessionInvoice,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice_from_session(
    session_id: int,
    sessions: TableSessionService = Depends(get_table_sessions),
) -> SessionInvoice:
    return await sessions.create_invoice_from_session(session_id)


__all__ = ["router"]
