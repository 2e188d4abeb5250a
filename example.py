"""
Example usage of dlc_manager library

This script demonstrates how to:
1. Load an app info document
2. Open the install dialog state for a game
3. Toggle DLC, inspect sizes and build the install request
"""

import logging
import sys
from pathlib import Path

from dlc_manager import GameManagerSession, JsonAppSource


def setup_logging():
    """Configure logging for the example."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """Main example function."""
    setup_logging()
    logger = logging.getLogger("example")

    source_path = Path(__file__).parent / "examples" / "sample_apps.json"
    source = JsonAppSource.from_file(str(source_path))

    session = GameManagerSession(source, on_install=lambda ids: logger.info(f"Installer called with {ids}"))
    session.open(1000)

    for row in session.items():
        state = "x" if row.checked else " "
        locked = "" if row.enabled else " (locked)"
        logger.info(f"[{state}] {row.app_id}: {row.name}{locked}")

    # Indirect DLC starts unchecked
    session.toggle(20, True)
    logger.info(session.install_size_display())

    if not session.can_confirm():
        logger.error("Install not possible with the current selection")
        return 1

    request = session.confirm()
    logger.info(f"Requested DLC: {request}")

    session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
