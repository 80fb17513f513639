"""Tray widget boundary for bean-tray."""

from bean_tray.tray.base import AppHost, TrayBackend
from bean_tray.tray.controller import TrayController, TrayVisibility
from bean_tray.tray.memory import InMemoryTrayBackend, RecordingAppHost

__all__ = [
    "AppHost",
    "InMemoryTrayBackend",
    "RecordingAppHost",
    "TrayBackend",
    "TrayController",
    "TrayVisibility",
]
