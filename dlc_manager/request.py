"""
Install request building
"""

from typing import Iterable, List, Optional

from dlc_manager.selection import SelectionStore


def build_install_request(selection: SelectionStore, game_id: int,
                          hidden_dlc_ids: Optional[Iterable[int]] = None) -> List[int]:
    """
    List the DLC app IDs to hand to the installer.

    The base game is installed implicitly and never requested. Hidden DLC
    is dropped even when selected.

    Args:
        selection: Current selection
        game_id: Base game app ID
        hidden_dlc_ids: DLC app IDs hidden from the catalog

    Returns:
        Selected app IDs in catalog order
    """
    hidden = set(hidden_dlc_ids or ())
    return [
        app_id for app_id in selection.ordered_selected_ids()
        if app_id != game_id and app_id not in hidden
    ]
