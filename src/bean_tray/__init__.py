"""bean-tray: Freshness-grouped coffee inventory menus for a desktop tray icon."""

from bean_tray.freshness import classify
from bean_tray.menu import MenuDocument, build_menu, dispatch
from bean_tray.projection import InventoryProjection, project
from bean_tray.schema import FreshnessInfo, FreshnessState, InventoryRecord
from bean_tray.tray import TrayController, TrayVisibility

__version__ = "0.1.0"

__all__ = [
    "classify",
    "project",
    "build_menu",
    "dispatch",
    "FreshnessInfo",
    "FreshnessState",
    "InventoryProjection",
    "InventoryRecord",
    "MenuDocument",
    "TrayController",
    "TrayVisibility",
    "__version__",
]
