"""
Install size aggregation for the current selection
"""

from typing import Dict

from dlc_manager import constants
from dlc_manager.models import DepotInfo, InstallSizeSnapshot
from dlc_manager.selection import SelectionStore


def compute_install_size(depots: Dict[int, DepotInfo], selection: SelectionStore,
                         available_bytes: int,
                         branch: str = constants.DEFAULT_BRANCH) -> InstallSizeSnapshot:
    """
    Compute download and install bytes for the base game plus selected DLC.

    Every depot of a selected DLC counts, not only the representative one.
    Depots without a manifest on the branch contribute nothing.

    Args:
        depots: Full depot mapping of the title
        selection: Current selection
        available_bytes: Free space at the install root
        branch: Distribution branch to read sizes from

    Returns:
        InstallSizeSnapshot for the selection
    """
    base_depots = [depot for depot in depots.values() if depot.is_base]
    selected_depots = [
        depot for depot in depots.values()
        if not depot.is_base and selection.is_selected(depot.dlc_app_id)
    ]

    base_install_bytes = sum(depot.size_for(branch) for depot in base_depots)
    base_download_bytes = sum(depot.download_for(branch) for depot in base_depots)
    selected_install_bytes = sum(depot.size_for(branch) for depot in selected_depots)
    selected_download_bytes = sum(depot.download_for(branch) for depot in selected_depots)

    return InstallSizeSnapshot(
        download_bytes=base_download_bytes + selected_download_bytes,
        install_bytes=base_install_bytes + selected_install_bytes,
        available_bytes=available_bytes
    )
