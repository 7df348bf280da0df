"""Duration and charge computation for closed table sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from billiards_admin.domain.errors import InvalidInterval
from billiards_admin.domain.money import Money, quantize
from billiards_admin.schemas.session import SessionRecord, StopSummary

logger = logging.getLogger(__name__)

_ONE_MINUTE = timedelta(minutes=1)
_MINUTES_PER_HOUR = Decimal(60)


@dataclass(frozen=True)
class Charge:
    duration_minutes: int
    total: Money


def elapsed_minutes(start_time: datetime, end_time: datetime) -> int:
    """Whole minutes between two timestamps; partial minutes are dropped."""

    if end_time < start_time:
        raise InvalidInterval("Session end time is earlier than its start time")
    return (end_time - start_time) // _ONE_MINUTE


def compute_charge(
    start_time: datetime,
    end_time: datetime,
    price_per_hour: Money,
) -> Charge:
    """Return the elapsed minutes and the amount owed at ``price_per_hour``.

    The amount is ``price_per_hour * minutes / 60`` rounded half up to the
    currency's minor unit. The POS API remains the pricing authority; this
    value is only used to verify or stand in for a missing server total.
    """

    minutes = elapsed_minutes(start_time, end_time)
    amount = price_per_hour.amount * Decimal(minutes) / _MINUTES_PER_HOUR
    return Charge(duration_minutes=minutes, total=Money(quantize(amount)))


def format_duration(minutes: int) -> str:
    hours, remaining = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {remaining}m"
    return f"{minutes}m"


def summarize_session(
    table_id: int,
    session: SessionRecord,
    price_per_hour: Money,
) -> StopSummary:
    """Build the stop summary for a closed session.

    Raises:
        InvalidInterval: If the session has no end time or ends before it starts.
    """

    if session.end_time is None:
        raise InvalidInterval("Session has not been closed yet")

    charge = compute_charge(session.start_time, session.end_time, price_per_hour)

    server_total: Optional[Money] = None
    if session.total is not None:
        server_total = Money.of(session.total)
        if server_total != charge.total:
            logger.warning(
                "Server total %s for session %s differs from computed %s",
                server_total,
                session.id,
                charge.total,
            )

    shown = server_total if server_total is not None else Money.zero()

    return StopSummary(
        table_id=table_id,
        session_id=session.id,
        start_time=session.start_time,
        end_time=session.end_time,
        duration_minutes=charge.duration_minutes,
        duration_display=format_duration(charge.duration_minutes),
        total=server_total.amount if server_total is not None else None,
        computed_total=charge.total.amount,
        total_display=shown.format(),
    )


__all__ = [
    "Charge",
    "compute_charge",
    "elapsed_minutes",
    "format_duration",
    "summarize_session",
]
