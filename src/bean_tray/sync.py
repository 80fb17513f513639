"""Push inventory snapshots to the tray only when they change."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date

from bean_tray.exceptions import BeanTrayError
from bean_tray.schema import InventoryRecord
from bean_tray.tray.controller import TrayController

logger = logging.getLogger(__name__)

GREEN_BEAN_STATE = "green"


class TraySync:
    """Deduplicating front door for ``TrayController.update_menu``.

    Green (unroasted) beans are never shown in the tray. Identical snapshots
    for the same day are skipped so repeated store updates do not rebuild the
    native menu.
    """

    def __init__(self, controller: TrayController):
        self.controller = controller
        self._last_key: str | None = None

    def push(self, records: Iterable[InventoryRecord], *, today: date | None = None) -> bool:
        """Sync the roasted beans to the tray.

        Returns:
            True if the menu was rebuilt, False if the snapshot was unchanged
            or the tray rejected it.
        """
        day = today or date.today()
        roasted = [record for record in records if record.bean_state != GREEN_BEAN_STATE]

        key = _sync_key(roasted, day)
        if key == self._last_key:
            return False
        self._last_key = key

        try:
            self.controller.update_menu(roasted, today=day)
        except BeanTrayError as e:
            logger.debug("tray sync failed: %s", e)
            return False

        logger.debug("tray synced, beans: %d", len(roasted))
        return True


def _sync_key(records: list[InventoryRecord], today: date) -> str:
    payload = {
        "today": today.isoformat(),
        "records": [record.model_dump(mode="json") for record in records],
    }
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)
