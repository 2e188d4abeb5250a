"""
Catalog building for the install dialog

Turns the raw depot mapping of a game title into the ordered list of
selectable items (base game first, then one entry per DLC app) and
the default selection for each of them.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from dlc_manager.models import CatalogItem, DepotInfo

logger = logging.getLogger("dlc_manager.catalog")


def sorted_depots(depots: Dict[int, DepotInfo]) -> List[DepotInfo]:
    """Depots in ascending depot ID order."""
    return [depots[depot_id] for depot_id in sorted(depots)]


def build_catalog(depots: Dict[int, DepotInfo], game_id: int,
                  installed_dlc_ids: Optional[Iterable[int]] = None,
                  indirect_dlc_ids: Optional[Iterable[int]] = None
                  ) -> Tuple[List[CatalogItem], Dict[int, bool]]:
    """
    Build the catalog items and initial selection for a game.

    DLC depots are grouped by dlc_app_id; each group is represented by its
    first depot in depot ID order, and groups are ordered the same way.

    Args:
        depots: Raw depot mapping (depot ID -> DepotInfo)
        game_id: Base game app ID
        installed_dlc_ids: DLC app IDs already installed
        indirect_dlc_ids: DLC app IDs only obtainable through another purchase

    Returns:
        Tuple of (catalog items, selection keyed by app ID in catalog order)

    Example:
        >>> items, selection = build_catalog(depots, 1000, installed, indirect)
        >>> [item.app_id for item in items]
        [1000, 10, 20]
    """
    installed = set(installed_dlc_ids or ())
    indirect = set(indirect_dlc_ids or ())
    ordered = sorted_depots(depots)

    base_depot = next((depot for depot in ordered if depot.is_base), None)
    items = [CatalogItem(app_id=game_id, depot=base_depot)]
    selection = {game_id: True}

    for depot in ordered:
        if depot.is_base or depot.dlc_app_id in selection:
            continue
        items.append(CatalogItem(app_id=depot.dlc_app_id, depot=depot))
        # Indirect DLC stays unchecked unless already installed
        selection[depot.dlc_app_id] = depot.dlc_app_id in installed or depot.dlc_app_id not in indirect

    logger.debug(f"Built catalog for {game_id}: {len(depots)} depots, {len(items) - 1} DLC")
    return items, selection
