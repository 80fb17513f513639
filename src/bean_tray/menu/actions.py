"""Menu action identifiers and click dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

BEAN_PREFIX = "bean:"
GROUP_PREFIX = "group:"

OPEN_APP = "open_app"
QUIT = "quit"
STAT_COUNT = "stat_count"
STAT_CAPACITY = "stat_capacity"
EMPTY = "empty"
LOADING = "loading"

ActionKind = Literal["navigate", "open", "quit", "noop"]


@dataclass(frozen=True)
class TrayAction:
    kind: ActionKind
    bean_id: str | None = None


def bean_action_id(bean_id: str) -> str:
    return f"{BEAN_PREFIX}{bean_id}"


def bean_id_from_action(action_id: str) -> str | None:
    """Return the record id behind a bean row action, or None for other ids."""
    if not action_id.startswith(BEAN_PREFIX):
        return None
    return action_id[len(BEAN_PREFIX):]


def group_id(state: str) -> str:
    return f"{GROUP_PREFIX}{state}"


def dispatch(action_id: str) -> TrayAction:
    """Map a clicked menu id to the outcome the host should perform.

    Informational rows, group headers and unrecognised ids are no-ops.
    """
    if action_id == OPEN_APP:
        return TrayAction("open")
    if action_id == QUIT:
        return TrayAction("quit")
    bean_id = bean_id_from_action(action_id)
    if bean_id is not None:
        return TrayAction("navigate", bean_id=bean_id)
    return TrayAction("noop")
