"""Headless tray backend and app host that record what they are asked to do."""

from __future__ import annotations

from PIL import Image

from bean_tray.menu.types import MenuDocument
from bean_tray.tray.base import AppHost, TrayBackend


class InMemoryTrayBackend(TrayBackend):
    """Keeps the installed menu and visibility in memory."""

    def __init__(self) -> None:
        self.menu: MenuDocument | None = None
        self.visible = True
        self.icon: Image.Image | None = None
        self.icon_as_template = False
        self.tooltip: str | None = None

    def set_menu(self, document: MenuDocument) -> None:
        self.menu = document

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_icon(self, icon: Image.Image, *, as_template: bool = False) -> None:
        self.icon = icon
        self.icon_as_template = as_template

    def set_tooltip(self, text: str) -> None:
        self.tooltip = text


class RecordingAppHost(AppHost):
    """Records host calls instead of touching windows or processes."""

    def __init__(self) -> None:
        self.window_shown = 0
        self.exit_code: int | None = None
        self.navigated: list[str] = []
        self.dock_visible = True

    def show_main_window(self) -> None:
        self.window_shown += 1

    def exit(self, code: int = 0) -> None:
        self.exit_code = code

    def emit_navigate(self, bean_id: str) -> None:
        self.navigated.append(bean_id)

    def set_dock_visible(self, visible: bool) -> None:
        self.dock_visible = visible
