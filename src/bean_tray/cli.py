"""Command-line preview of the tray menu."""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date

from pydantic import TypeAdapter, ValidationError

from bean_tray import __version__
from bean_tray.config import TrayConfig
from bean_tray.exceptions import BeanTrayError
from bean_tray.menu.types import MenuDocument, MenuItem, MenuSubmenu
from bean_tray.schema import InventoryRecord
from bean_tray.tray import InMemoryTrayBackend, RecordingAppHost, TrayController

_records_adapter = TypeAdapter(list[InventoryRecord])


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bean-tray",
        description="Preview the tray menu for a JSON inventory read from stdin",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the menu document as JSON",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="Reference date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--label-width",
        type=int,
        help="Display columns per bean name (default: BEAN_TRAY_LABEL_WIDTH or 16)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bean-tray {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = TrayConfig.from_env()
        if args.label_width is not None:
            config = replace(config, label_width=args.label_width)
        records = _records_adapter.validate_json(sys.stdin.read())
        controller = TrayController(InMemoryTrayBackend(), RecordingAppHost(), config)
        document = controller.update_menu(records, today=args.today)
    except ValidationError as e:
        print(f"Error: invalid inventory: {e}", file=sys.stderr)
        return 1
    except BeanTrayError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(document.model_dump_json(indent=2))
    else:
        _print_formatted(document)

    return 0


def _print_formatted(document: MenuDocument) -> None:
    """Print the menu as an indented outline."""
    print()
    for entry in document.entries:
        if isinstance(entry, MenuSubmenu):
            print(f"  {entry.label} ▸")
            for item in entry.items:
                print(f"      {_format_item(item)}")
        elif isinstance(entry, MenuItem):
            print(f"  {_format_item(entry)}")
        else:
            print("  ────────")
    print()


def _format_item(item: MenuItem) -> str:
    return item.label if item.enabled else f"({item.label})"


if __name__ == "__main__":
    sys.exit(main())
