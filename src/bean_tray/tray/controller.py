"""Tray controller: runs the menu pipeline and routes tray events to the host."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TypeVar

from bean_tray.config import TrayConfig
from bean_tray.exceptions import TrayBackendError
from bean_tray.menu.actions import TrayAction, dispatch
from bean_tray.menu.builder import build_loading_menu, build_menu
from bean_tray.menu.types import MenuDocument
from bean_tray.projection import project
from bean_tray.schema import InventoryRecord
from bean_tray.tray.base import AppHost, TrayBackend
from bean_tray.tray.icon import load_icon, select_icon

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TrayVisibility:
    """Shared tray visibility flag.

    Passed explicitly to every caller that toggles the tray, since OS events
    and explicit toggles may arrive from different threads. Hold ``lock``
    while reading and writing ``visible`` together.
    """

    visible: bool = True
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


class TrayController:
    """Coordinates the menu pipeline, the tray backend and the app host."""

    def __init__(
        self,
        backend: TrayBackend,
        host: AppHost,
        config: TrayConfig | None = None,
    ):
        self.backend = backend
        self.host = host
        self.config = config or TrayConfig()

    def update_menu(
        self,
        records: Iterable[InventoryRecord],
        *,
        today: date | None = None,
    ) -> MenuDocument:
        """Rebuild the menu from a full inventory snapshot and install it.

        Args:
            records: Every inventory record known to the frontend.
            today: Reference date. Defaults to the local current date.

        Returns:
            The installed MenuDocument.

        Raises:
            TrayBackendError: If the backend rejects the document. The
                previously installed menu stays in place.
        """
        projection = project(
            records,
            today or date.today(),
            default_start_day=self.config.default_start_day,
            default_end_day=self.config.default_end_day,
        )
        document = build_menu(
            projection,
            label_width=self.config.label_width,
            app_name=self.config.app_name,
        )
        self._call_backend("set_menu", self.backend.set_menu, document)
        logger.debug(
            "tray menu updated: %d active beans in %d groups",
            projection.count,
            len(projection.groups),
        )
        return document

    def show_loading_menu(self) -> MenuDocument:
        document = build_loading_menu(app_name=self.config.app_name)
        self._call_backend("set_menu", self.backend.set_menu, document)
        return document

    def set_visible(self, visibility: TrayVisibility, visible: bool) -> None:
        """Show or hide the tray icon together with the dock presence.

        If the dock toggle fails, the tray icon is restored to its previous
        visibility so ``visibility.visible`` still matches the widget.
        """
        with visibility.lock:
            self._call_backend("set_visible", self.backend.set_visible, visible)
            try:
                self._call_backend("set_dock_visible", self.host.set_dock_visible, visible)
            except TrayBackendError:
                self._call_backend("set_visible", self.backend.set_visible, visibility.visible)
                raise
            visibility.visible = visible
        logger.info("tray visibility set to %s", visible)

    def install_icon(self, icon_dir: str | Path, platform: str = sys.platform) -> None:
        """Load the platform icon from ``icon_dir`` and apply it with the tooltip."""
        spec = select_icon(platform)
        image = load_icon(Path(icon_dir) / spec.filename)
        self._call_backend("set_icon", lambda: self.backend.set_icon(image, as_template=spec.as_template))
        self._call_backend("set_tooltip", self.backend.set_tooltip, self.config.tooltip)

    def handle_menu_event(self, action_id: str) -> TrayAction:
        """Perform the host side effect for a clicked menu id."""
        action = dispatch(action_id)
        if action.kind == "open":
            self.host.show_main_window()
        elif action.kind == "quit":
            self.host.exit(0)
        elif action.kind == "navigate" and action.bean_id is not None:
            self.host.show_main_window()
            self.host.emit_navigate(action.bean_id)
        else:
            logger.debug("ignoring menu event %r", action_id)
        return action

    def handle_tray_click(self, button: str, *, released: bool) -> bool:
        """Bring the main window to front on a left-button release."""
        if button == "left" and released:
            self.host.show_main_window()
            return True
        return False

    def _call_backend(self, operation: str, func: Callable[..., T], *args) -> T:
        try:
            return func(*args)
        except Exception as e:
            logger.exception("tray %s failed", operation)
            raise TrayBackendError(str(e)) from e
