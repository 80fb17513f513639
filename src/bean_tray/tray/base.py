"""Interfaces for the tray widget toolkit and the owning application."""

from abc import ABC, abstractmethod

from PIL import Image

from bean_tray.menu.types import MenuDocument


class TrayBackend(ABC):
    """Abstract base class for native tray widget implementations."""

    @abstractmethod
    def set_menu(self, document: MenuDocument) -> None:
        """Replace the tray menu with the given document.

        Args:
            document: Menu content to render as native items. Disabled rows
                must be rendered non-clickable.
        """
        pass

    @abstractmethod
    def set_visible(self, visible: bool) -> None:
        """Show or hide the tray icon."""
        pass

    def set_icon(self, icon: Image.Image, *, as_template: bool = False) -> None:
        """Set the tray icon image. Template icons adapt to light/dark menus."""
        return None

    def set_tooltip(self, text: str) -> None:
        return None


class AppHost(ABC):
    """Abstract base class for the application that owns the tray."""

    @abstractmethod
    def show_main_window(self) -> None:
        """Show the main window and bring it to front."""
        pass

    @abstractmethod
    def exit(self, code: int = 0) -> None:
        pass

    @abstractmethod
    def emit_navigate(self, bean_id: str) -> None:
        """Notify the frontend that the user picked a bean."""
        pass

    def set_dock_visible(self, visible: bool) -> None:
        """Toggle the companion dock/taskbar presence where the platform has one."""
        return None
