"""Build the tray menu document from an inventory projection."""

from __future__ import annotations

from bean_tray.menu import actions
from bean_tray.menu.types import MenuDocument, MenuEntry, MenuItem, MenuSeparator, MenuSubmenu
from bean_tray.projection import InventoryProjection
from bean_tray.schema import FreshnessInfo, FreshnessState
from bean_tray.text import format_capacity, truncate_display

DEFAULT_LABEL_WIDTH = 16
DEFAULT_APP_NAME = "Brew Guide"

GROUP_LABELS: dict[FreshnessState, str] = {
    "frozen": "冷冻中",
    "optimal": "赏味期",
    "resting": "养豆期",
    "decline": "衰退期",
    "in_transit": "在途",
    "unknown": "未知",
}

DAY_SEPARATOR = " · "
DAY_UNIT = "天"


def build_menu(
    projection: InventoryProjection,
    *,
    label_width: int = DEFAULT_LABEL_WIDTH,
    app_name: str = DEFAULT_APP_NAME,
) -> MenuDocument:
    """Assemble stats header, freshness groups and footer actions.

    Args:
        projection: Grouped and sorted inventory.
        label_width: Display columns reserved for each bean name.
        app_name: Name shown on the open-application row.

    Returns:
        MenuDocument ready to hand to a tray backend.
    """
    entries: list[MenuEntry] = [
        MenuItem(id=actions.STAT_COUNT, label=f"库存数量：{projection.count} 款", enabled=False),
        MenuItem(
            id=actions.STAT_CAPACITY,
            label=f"库存容量：{format_capacity(projection.total_remaining)}",
            enabled=False,
        ),
        MenuSeparator(),
    ]

    if projection.is_empty:
        entries.append(MenuItem(id=actions.EMPTY, label="暂无咖啡豆库存", enabled=False))
    else:
        for state, infos in projection.ordered_groups():
            entries.append(
                MenuSubmenu(
                    id=actions.group_id(state),
                    label=f"{GROUP_LABELS[state]}（{len(infos)} 款）",
                    items=[_bean_row(state, info, label_width) for info in infos],
                )
            )

    entries.extend(_footer(app_name))
    return MenuDocument(entries=entries)


def build_loading_menu(*, app_name: str = DEFAULT_APP_NAME) -> MenuDocument:
    """Placeholder document shown before the first inventory sync."""
    entries: list[MenuEntry] = [
        MenuItem(id=actions.STAT_COUNT, label="库存数量：- 款", enabled=False),
        MenuItem(id=actions.STAT_CAPACITY, label="库存容量：-", enabled=False),
        MenuSeparator(),
        MenuItem(id=actions.LOADING, label="加载中…", enabled=False),
    ]
    entries.extend(_footer(app_name))
    return MenuDocument(entries=entries)


def _footer(app_name: str) -> list[MenuEntry]:
    return [
        MenuSeparator(),
        MenuItem(id=actions.OPEN_APP, label=f"打开 {app_name}"),
        MenuItem(id=actions.QUIT, label="退出"),
    ]


def _bean_row(state: FreshnessState, info: FreshnessInfo, label_width: int) -> MenuItem:
    name = truncate_display(info.record.name, label_width)
    days = _day_count(state, info)
    label = f"{days} {DAY_UNIT}{DAY_SEPARATOR}{name}" if days is not None else name
    return MenuItem(id=actions.bean_action_id(info.record.id), label=label)


def _day_count(state: FreshnessState, info: FreshnessInfo) -> str | None:
    if state == "optimal":
        return f"{info.days_until_end:>2}"
    if state == "resting":
        return f"{info.days_until_start:>2}"
    if state == "decline":
        return f"{info.days_past_end:>+2}"
    return None
