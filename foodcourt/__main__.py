"""Entry point for the foodcourt text menu."""

from __future__ import annotations

import logging

from foodcourt import config
from foodcourt.actions import Session
from foodcourt.app import FoodCourtApp
from foodcourt.errors import StorageError
from foodcourt.logger import configure_logging
from foodcourt.persistence import RecordStore
from foodcourt.terminal import Terminal

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the menu loop; exit status 1 when a collection cannot be read or written."""
    configure_logging()
    terminal = Terminal()
    session = Session(store=RecordStore(config.DATA_DIR), terminal=terminal)
    try:
        FoodCourtApp(session).run()
    except StorageError as exc:
        logger.exception("storage failure")
        terminal.error(f"Storage error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
