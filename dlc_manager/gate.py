"""
Install button gating
"""

from typing import Iterable, Optional

from dlc_manager.models import InstallSizeSnapshot
from dlc_manager.selection import SelectionStore


def can_install(snapshot: InstallSizeSnapshot, selection: SelectionStore,
                installed_dlc_ids: Optional[Iterable[int]] = None) -> bool:
    """
    Decide whether the install action may proceed.

    Args:
        snapshot: Size snapshot of the current selection
        selection: Current selection
        installed_dlc_ids: DLC app IDs of the prior installation,
            None for a fresh install

    Returns:
        False if space is insufficient or nothing new is selected
    """
    if snapshot.available_bytes < snapshot.install_bytes:
        return False

    selected_count = selection.count_selected()

    if installed_dlc_ids is not None:
        # -1 for the base game, which is always selected
        return selected_count - len(set(installed_dlc_ids)) - 1 > 0

    return selected_count > 0
