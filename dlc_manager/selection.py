"""
Selection state for the install dialog
"""

import logging
from typing import Dict, Iterable, List, Optional, Set


class SelectionStore:
    """
    Holds which catalog entries the user wants installed.

    The base game and DLC that are already installed are locked:
    toggling them is ignored, as is toggling IDs outside the catalog.
    Iteration order is catalog order.
    """

    def __init__(self, game_id: int, initial: Dict[int, bool],
                 installed_dlc_ids: Optional[Iterable[int]] = None):
        """
        Initialize the selection store.

        Args:
            game_id: Base game app ID (always selected)
            initial: Default selection in catalog order
            installed_dlc_ids: DLC app IDs already installed
        """
        self.logger = logging.getLogger("dlc_manager.selection")
        self.game_id = game_id
        self.installed: Set[int] = set(installed_dlc_ids or ())
        self._selected: Dict[int, bool] = dict(initial)
        self._selected[game_id] = True

    def is_locked(self, app_id: int) -> bool:
        """Check if an entry can not be changed by the user."""
        return app_id == self.game_id or app_id in self.installed

    def toggle(self, app_id: int, value: bool) -> bool:
        """
        Set the selection of an entry.

        Args:
            app_id: App ID of the entry
            value: True to select, False to deselect

        Returns:
            True if the selection was applied, False if it was ignored
        """
        if app_id not in self._selected:
            self.logger.debug(f"Ignoring toggle for unknown app {app_id}")
            return False

        if self.is_locked(app_id):
            self.logger.debug(f"Ignoring toggle for locked app {app_id}")
            return False

        self._selected[app_id] = bool(value)
        return True

    def is_selected(self, app_id: int) -> bool:
        return self._selected.get(app_id, False)

    def selected_ids(self) -> Set[int]:
        return {app_id for app_id, value in self._selected.items() if value}

    def ordered_selected_ids(self) -> List[int]:
        """Selected IDs in catalog order."""
        return [app_id for app_id, value in self._selected.items() if value]

    def count_selected(self) -> int:
        return sum(1 for value in self._selected.values() if value)

    def as_dict(self) -> Dict[int, bool]:
        return dict(self._selected)

    def __contains__(self, app_id: int) -> bool:
        return app_id in self._selected

    def __repr__(self):
        return f"SelectionStore(game_id={self.game_id}, selected={self.ordered_selected_ids()})"
