"""Tray menu document building and click dispatch."""

from bean_tray.menu.actions import TrayAction, bean_action_id, bean_id_from_action, dispatch
from bean_tray.menu.builder import build_loading_menu, build_menu
from bean_tray.menu.types import MenuDocument, MenuItem, MenuSeparator, MenuSubmenu

__all__ = [
    "MenuDocument",
    "MenuItem",
    "MenuSeparator",
    "MenuSubmenu",
    "TrayAction",
    "bean_action_id",
    "bean_id_from_action",
    "build_loading_menu",
    "build_menu",
    "dispatch",
]
