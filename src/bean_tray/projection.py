"""Group and order classified inventory for display."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date

from bean_tray.freshness import DEFAULT_END_DAY, DEFAULT_START_DAY, classify
from bean_tray.schema import FreshnessInfo, FreshnessState, InventoryRecord

GROUP_ORDER: tuple[FreshnessState, ...] = (
    "frozen",
    "optimal",
    "resting",
    "decline",
    "in_transit",
    "unknown",
)

_SORT_KEYS: dict[FreshnessState, Callable[[FreshnessInfo], int]] = {
    "optimal": lambda info: info.days_until_end,
    "resting": lambda info: info.days_until_start,
    "decline": lambda info: info.days_since_roast,
}


@dataclass(frozen=True)
class InventoryProjection:
    groups: dict[FreshnessState, list[FreshnessInfo]] = field(default_factory=dict)
    count: int = 0
    total_remaining: float = 0.0

    def ordered_groups(self) -> Iterator[tuple[FreshnessState, list[FreshnessInfo]]]:
        """Yield non-empty groups in display order."""
        for state in GROUP_ORDER:
            infos = self.groups.get(state)
            if infos:
                yield state, infos

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def parse_quantity(value: str | None) -> float | None:
    """Parse a string-encoded gram amount, returning None when invalid."""
    # float() also accepts digit separators like "1_000".
    if value is None or "_" in value:
        return None
    try:
        amount = float(value)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def project(
    records: Iterable[InventoryRecord],
    today: date,
    *,
    default_start_day: int = DEFAULT_START_DAY,
    default_end_day: int = DEFAULT_END_DAY,
) -> InventoryProjection:
    """Classify, partition and sort the records that still have beans left.

    Records whose ``remaining`` is absent, unparsable or not positive are
    dropped. Every other record lands in exactly one group.
    """
    active: list[tuple[InventoryRecord, float]] = []
    for record in records:
        amount = parse_quantity(record.remaining)
        if amount is not None and amount > 0:
            active.append((record, amount))

    groups: dict[FreshnessState, list[FreshnessInfo]] = {}
    for record, _ in active:
        info = classify(
            record,
            today,
            default_start_day=default_start_day,
            default_end_day=default_end_day,
        )
        groups.setdefault(info.state, []).append(info)

    for state, infos in groups.items():
        sort_key = _SORT_KEYS.get(state)
        if sort_key is not None:
            infos.sort(key=sort_key)

    return InventoryProjection(
        groups=groups,
        count=len(active),
        total_remaining=math.fsum(amount for _, amount in active),
    )
