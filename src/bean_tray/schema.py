"""Data models for bean-tray."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FreshnessState = Literal["in_transit", "frozen", "unknown", "resting", "optimal", "decline"]


class InventoryRecord(BaseModel):
    """Coffee bean inventory entry as pushed by the frontend.

    Accepts both the frontend's camelCase keys (``roastDate``, ``isFrozen``)
    and snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    remaining: str | None = None
    capacity: str | None = None
    roast_date: str | None = None
    start_day: int | None = None
    end_day: int | None = None
    is_frozen: bool | None = None
    is_in_transit: bool | None = None
    bean_state: str | None = None


class FreshnessInfo(BaseModel):
    """Freshness classification of a single inventory record."""

    record: InventoryRecord
    days_since_roast: int = 0
    start_day: int
    end_day: int
    state: FreshnessState
    progress_percent: float = Field(default=0.0, ge=0.0, le=100.0)

    @property
    def days_until_start(self) -> int:
        return self.start_day - self.days_since_roast

    @property
    def days_until_end(self) -> int:
        return self.end_day - self.days_since_roast

    @property
    def days_past_end(self) -> int:
        return self.days_since_roast - self.end_day
