"""Data models for the tray menu document."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class MenuItem(BaseModel):
    """A single clickable or informational row."""

    kind: Literal["item"] = "item"
    id: str
    label: str
    enabled: bool = True


class MenuSeparator(BaseModel):
    kind: Literal["separator"] = "separator"


class MenuSubmenu(BaseModel):
    """A labelled group of rows. The header itself is never an action."""

    kind: Literal["submenu"] = "submenu"
    id: str
    label: str
    items: list[MenuItem] = Field(default_factory=list)


MenuEntry = Annotated[MenuItem | MenuSeparator | MenuSubmenu, Field(discriminator="kind")]


class MenuDocument(BaseModel):
    """Ordered menu content handed to the tray widget."""

    entries: list[MenuEntry] = Field(default_factory=list)

    def items(self) -> list[MenuItem]:
        """Return every row, descending into submenus, in display order."""
        rows: list[MenuItem] = []
        for entry in self.entries:
            if isinstance(entry, MenuItem):
                rows.append(entry)
            elif isinstance(entry, MenuSubmenu):
                rows.extend(entry.items)
        return rows

    def action_ids(self) -> list[str]:
        return [item.id for item in self.items() if item.enabled]

    def find(self, entry_id: str) -> MenuItem | MenuSubmenu | None:
        for entry in self.entries:
            if isinstance(entry, MenuSubmenu):
                if entry.id == entry_id:
                    return entry
                for item in entry.items:
                    if item.id == entry_id:
                        return item
            elif isinstance(entry, MenuItem) and entry.id == entry_id:
                return entry
        return None
