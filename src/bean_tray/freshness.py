"""Freshness classification relative to the roast date."""

from __future__ import annotations

from datetime import date, datetime

from bean_tray.schema import FreshnessInfo, FreshnessState, InventoryRecord

DEFAULT_START_DAY = 7
DEFAULT_END_DAY = 30

ROAST_DATE_FORMAT = "%Y-%m-%d"


def parse_roast_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` roast date, returning None when invalid."""
    if not value:
        return None
    try:
        return datetime.strptime(value, ROAST_DATE_FORMAT).date()
    except ValueError:
        return None


def classify(
    record: InventoryRecord,
    today: date,
    *,
    default_start_day: int = DEFAULT_START_DAY,
    default_end_day: int = DEFAULT_END_DAY,
) -> FreshnessInfo:
    """Classify a record into a freshness state for the given day.

    Malformed or missing roast dates never raise: they yield
    ``days_since_roast == 0`` and the ``unknown`` state (unless the bean is
    in transit or frozen, which take precedence).

    Args:
        record: Inventory record to classify.
        today: Reference date, normally the local current date.
        default_start_day: Window start used when the record has none.
        default_end_day: Window end used when the record has none.

    Returns:
        FreshnessInfo with derived day counts, state and window progress.
    """
    roasted_on = parse_roast_date(record.roast_date)
    days_since_roast = (today - roasted_on).days if roasted_on else 0

    start_day = record.start_day if record.start_day is not None else default_start_day
    end_day = record.end_day if record.end_day is not None else default_end_day

    state = _resolve_state(record, roasted_on is not None, days_since_roast, start_day, end_day)

    return FreshnessInfo(
        record=record,
        days_since_roast=days_since_roast,
        start_day=start_day,
        end_day=end_day,
        state=state,
        progress_percent=_progress_percent(state, days_since_roast, start_day, end_day),
    )


def _resolve_state(
    record: InventoryRecord,
    has_roast_date: bool,
    days_since_roast: int,
    start_day: int,
    end_day: int,
) -> FreshnessState:
    # Order matters: transit and frozen override the roast clock.
    if record.is_in_transit:
        return "in_transit"
    if record.is_frozen:
        return "frozen"
    if not has_roast_date:
        return "unknown"
    if days_since_roast < start_day:
        return "resting"
    if days_since_roast <= end_day:
        return "optimal"
    return "decline"


def _progress_percent(
    state: FreshnessState,
    days_since_roast: int,
    start_day: int,
    end_day: int,
) -> float:
    window = end_day - start_day
    if state == "optimal" and window > 0:
        percent = (days_since_roast - start_day) / window * 100.0
        return max(0.0, min(100.0, percent))
    if days_since_roast > end_day:
        return 100.0
    return 0.0
