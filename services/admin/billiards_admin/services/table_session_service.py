"""Table occupancy tracking against the POS API."""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.core.config import settings
from billiards_admin.domain.errors import (
    InvalidTableState,
    InvoiceCreationFailed,
    OperationInProgress,
    SessionNotFound,
    TableNotFound,
    UpstreamRequestFailed,
)
from billiards_admin.domain.money import Money
from billiards_admin.schemas.session import SessionInvoice, SessionRecord, StopSummary
from billiards_admin.schemas.table import TableRecord, TableStatus, TableView
from billiards_admin.services.billing import summarize_session

logger = logging.getLogger(__name__)


@dataclass
class _TableState:
    record: TableRecord
    current_session: Optional[SessionRecord] = None
    session_error: Optional[str] = None
    last_stop: Optional[StopSummary] = None
    invoice_id: Optional[int] = None

    @property
    def has_active_session(self) -> bool:
        return self.current_session is not None and self.current_session.is_active

    def to_view(self, *, busy: bool = False) -> TableView:
        return TableView(
            **self.record.model_dump(),
            busy=busy,
            current_session=self.current_session,
            session_error=self.session_error,
            last_stop=self.last_stop,
            invoice_id=self.invoice_id,
        )


class TableSessionService:
    """Keeps the local table list consistent with the POS API.

    State only changes on ``refresh`` and on the success paths of ``start``,
    ``stop`` and ``create_invoice_from_session``. A failed call leaves every
    table exactly as it was.
    """

    _STARTABLE_STATUSES = (TableStatus.AVAILABLE, TableStatus.RESERVED)

    def __init__(
        self,
        client: PosApiClient,
        *,
        fetch_concurrency: Optional[int] = None,
    ) -> None:
        self._client = client
        self._fetch_concurrency = max(
            1, fetch_concurrency or settings.SESSION_FETCH_CONCURRENCY
        )
        self._tables: Dict[int, _TableState] = {}
        self._in_flight: Set[int] = set()
        # Closed, not yet invoiced sessions; they outlive the table's currentSession.
        self._closed_sessions: Dict[int, SessionRecord] = {}

    def list_tables(self) -> List[TableView]:
        return [self._view(state) for state in self._tables.values()]

    def get_table(self, table_id: int) -> TableView:
        return self._view(self._require_table(table_id))

    def is_busy(self, table_id: int) -> bool:
        return table_id in self._in_flight

    def _view(self, state: _TableState) -> TableView:
        return state.to_view(busy=self.is_busy(state.record.id))

    def _require_table(self, table_id: int) -> _TableState:
        state = self._tables.get(table_id)
        if state is None:
            raise TableNotFound(f"Table {table_id} is not loaded")
        return state

    @contextmanager
    def _claim(self, table_id: int) -> Iterator[None]:
        if table_id in self._in_flight:
            raise OperationInProgress(
                f"Table {table_id} already has a request in progress"
            )
        self._in_flight.add(table_id)
        try:
            yield
        finally:
            self._in_flight.discard(table_id)

    async def refresh(self) -> List[TableView]:
        """Reload every table and the active session of each occupied one."""

        records = await self._client.list_tables()
        semaphore = asyncio.Semaphore(self._fetch_concurrency)

        async def load(record: TableRecord) -> _TableState:
            state = _TableState(record=record)
            if record.status is not TableStatus.OCCUPIED:
                return state

            async with semaphore:
                try:
                    session = await self._client.get_active_session(record.id)
                except UpstreamRequestFailed as exc:
                    logger.warning(
                        "Active session lookup failed for table %s: %s",
                        record.id,
                        exc,
                    )
                    if exc.is_not_found:
                        state.session_error = "No active session found for occupied table"
                    else:
                        state.session_error = "Active session lookup failed"
                    return state

            if session is None or not session.is_active:
                state.session_error = "No active session found for occupied table"
            else:
                state.current_session = session
            return state

        states = await asyncio.gather(*(load(record) for record in records))
        self._tables = {state.record.id: state for state in states}
        logger.debug(
            "Refreshed %s tables, %s with an active session",
            len(states),
            sum(1 for state in states if state.has_active_session),
        )
        return self.list_tables()

    async def start(self, table_id: int) -> TableView:
        """Open a session on an available or reserved table."""

        with self._claim(table_id):
            state = self._require_table(table_id)
            if state.record.status not in self._STARTABLE_STATUSES:
                raise InvalidTableState(
                    f"Table {table_id} cannot be started while {state.record.status.value}"
                )
            if state.has_active_session:
                raise InvalidTableState(f"Table {table_id} already has an active session")

            session = await self._client.start_session(table_id)
            if not session.is_active:
                raise UpstreamRequestFailed(
                    f"POS API returned a closed session when starting table {table_id}"
                )

            state = self._tables.get(table_id, state)
            state.record = state.record.model_copy(update={"status": TableStatus.OCCUPIED})
            state.current_session = session
            state.session_error = None
            state.last_stop = None
            state.invoice_id = None
            self._closed_sessions = {
                closed_id: closed
                for closed_id, closed in self._closed_sessions.items()
                if closed.table_id != table_id
            }
            logger.info("Started session %s on table %s", session.id, table_id)
            return state.to_view()

    async def stop(self, table_id: int) -> StopSummary:
        """Close the tracked active session and report its duration and total.

        Raises:
            SessionNotFound: If no active session is tracked for the table.
        """

        with self._claim(table_id):
            state = self._require_table(table_id)
            if not state.has_active_session:
                raise SessionNotFound(f"No active session tracked for table {table_id}")
            price_per_hour = Money.of(state.record.price_per_hour)

            closed = await self._client.end_session(table_id)
            if closed.end_time is None:
                raise UpstreamRequestFailed(
                    f"POS API did not close the session of table {table_id}"
                )
            if closed.table_id is None:
                closed = closed.model_copy(update={"table_id": table_id})

            summary = summarize_session(table_id, closed, price_per_hour)

            state = self._tables.get(table_id, state)
            state.record = state.record.model_copy(update={"status": TableStatus.AVAILABLE})
            state.current_session = closed
            state.session_error = None
            state.last_stop = summary
            state.invoice_id = None
            self._closed_sessions[closed.id] = closed
            logger.info(
                "Stopped session %s on table %s after %s",
                closed.id,
                table_id,
                summary.duration_display,
            )
            return summary

    def _find_session(self, session_id: int) -> Optional[Tuple[int, SessionRecord]]:
        closed = self._closed_sessions.get(session_id)
        if closed is not None and closed.table_id is not None:
            return closed.table_id, closed
        for table_id, state in self._tables.items():
            if state.current_session is not None and state.current_session.id == session_id:
                return table_id, state.current_session
        return None

    def _state_holding(self, table_id: int, session_id: int) -> Optional[_TableState]:
        state = self._tables.get(table_id)
        if state is None or state.current_session is None:
            return None
        return state if state.current_session.id == session_id else None

    async def create_invoice_from_session(self, session_id: int) -> SessionInvoice:
        """Turn a closed session into an invoice, at most once.

        Raises:
            SessionNotFound: If the session is not tracked.
            InvoiceCreationFailed: If the session is still open, was already
                invoiced, or the POS API rejects the request.
        """

        found = self._find_session(session_id)
        if found is None:
            raise SessionNotFound(f"Session {session_id} is not tracked")
        table_id, session = found

        with self._claim(table_id):
            if session.is_active:
                raise InvoiceCreationFailed(f"Session {session_id} is still active")
            state = self._state_holding(table_id, session_id)
            if state is not None and state.invoice_id is not None:
                raise InvoiceCreationFailed(
                    f"Session {session_id} was already invoiced as {state.invoice_id}"
                )

            try:
                invoice = await self._client.create_invoice_from_session(session_id)
            except UpstreamRequestFailed as exc:
                raise InvoiceCreationFailed(
                    f"POS API rejected the invoice for session {session_id}"
                ) from exc

            self._closed_sessions.pop(session_id, None)
            state = self._state_holding(table_id, session_id)
            if state is not None:
                state.invoice_id = invoice.id
            logger.info("Created invoice %s from session %s", invoice.id, session_id)
            return SessionInvoice(session_id=session_id, invoice_id=invoice.id)


__all__ = ["TableSessionService"]
