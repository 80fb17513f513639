"""Tray icon selection and loading."""

import sys
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from bean_tray.exceptions import TrayIconError

TEMPLATE_ICON = "tray-iconTemplate@2x.png"
COLOR_ICON = "tray-icon.png"

IconInput = str | Path | Image.Image


@dataclass(frozen=True)
class IconSpec:
    filename: str
    as_template: bool


def select_icon(platform: str = sys.platform) -> IconSpec:
    """Pick the icon variant for a platform.

    macOS menu bars use a monochrome template image that the system tints
    for light and dark mode.
    """
    if platform == "darwin":
        return IconSpec(filename=TEMPLATE_ICON, as_template=True)
    return IconSpec(filename=COLOR_ICON, as_template=False)


def load_icon(icon: IconInput) -> Image.Image:
    """Load an icon from a path or pass through an already open image."""
    if isinstance(icon, Image.Image):
        return icon

    path = Path(icon) if isinstance(icon, str) else icon
    if not path.exists():
        raise TrayIconError(f"Icon file not found: {path}")

    try:
        image = Image.open(path)
        image.load()
    except Exception as e:
        raise TrayIconError(f"Failed to open icon: {e}") from e
    return image
