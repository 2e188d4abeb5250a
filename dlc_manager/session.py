"""
Game manager session

Host-facing surface of the install dialog: opened for one game, mutated by
user toggles, queried for sizes and install enablement, and finally
confirmed into an install request.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set

from dlc_manager import constants, utils
from dlc_manager.catalog import build_catalog
from dlc_manager.gate import can_install
from dlc_manager.models import CatalogItem, DepotInfo, InstallSizeSnapshot, InstalledApp
from dlc_manager.request import build_install_request
from dlc_manager.selection import SelectionStore
from dlc_manager.sizes import compute_install_size


class SessionError(Exception):
    """Exception raised when the session is used before open()."""
    pass


@dataclass
class CatalogRow:
    """Display row for one catalog entry."""
    app_id: int
    name: str
    checked: bool
    enabled: bool
    depot: Optional[DepotInfo] = None

    def label(self, debug: bool = False) -> str:
        if debug and self.depot is not None:
            return f"{self.name}\ndepotId: {self.depot.depot_id}, dlcAppId: {self.depot.dlc_app_id}"
        return self.name


class GameManagerSession:
    """
    Install dialog state for a single game.

    The source supplies the depot catalog, the prior install record and the
    indirect/hidden DLC lists; the space probe reports free bytes at the
    install root and is queried on every size summary.
    """

    def __init__(self, source, storage_path: Optional[str] = None,
                 branch: Optional[str] = None,
                 space_probe: Optional[Callable[[str], int]] = None,
                 on_install: Optional[Callable[[List[int]], None]] = None):
        """
        Initialize the session.

        Args:
            source: App info source (see JsonAppSource)
            storage_path: Install root, defaults to $DLC_MANAGER_STORAGE_PATH or ~/Games
            branch: Size branch, defaults to $DLC_MANAGER_BRANCH or "public"
            space_probe: Callable returning free bytes for a path,
                defaults to utils.get_available_space
            on_install: Called with the install request on confirm
        """
        self.logger = logging.getLogger("dlc_manager.session")
        self.source = source
        self.storage_path = storage_path or os.environ.get(
            constants.ENV_STORAGE_PATH, constants.DEFAULT_STORAGE_PATH)
        self.branch = branch or os.environ.get(constants.ENV_BRANCH, constants.DEFAULT_BRANCH)
        self.space_probe = space_probe or utils.get_available_space
        self.on_install = on_install

        self.game_id: Optional[int] = None
        self.depots: Dict[int, DepotInfo] = {}
        self.catalog: List[CatalogItem] = []
        self.selection: Optional[SelectionStore] = None
        self.installed_app: Optional[InstalledApp] = None
        self.hidden_dlc_ids: Set[int] = set()

    @property
    def is_open(self) -> bool:
        return self.selection is not None

    @property
    def installed_dlc_ids(self) -> Optional[Set[int]]:
        """Installed DLC IDs, None when the game has no prior install."""
        if self.installed_app is None:
            return None
        return set(self.installed_app.dlc_depots)

    def _require_open(self) -> SelectionStore:
        if self.selection is None:
            raise SessionError("Session is not open; call open(game_id) first")
        return self.selection

    def open(self, game_id: int) -> List[CatalogItem]:
        """
        Rebuild the catalog and default selection for a game.

        Args:
            game_id: Base game app ID

        Returns:
            Catalog items in display order
        """
        self.logger.info(f"Opening install dialog for {game_id}")

        self.game_id = game_id
        self.depots = self.source.get_catalog(game_id) or {}
        self.installed_app = self.source.get_installed_app(game_id)
        indirect_dlc_ids = self.source.get_indirect_dlc_ids(game_id) or []
        self.hidden_dlc_ids = set(self.source.get_hidden_dlc_ids(game_id) or [])

        installed = self.installed_dlc_ids or set()
        self.catalog, initial = build_catalog(self.depots, game_id, installed, indirect_dlc_ids)
        self.selection = SelectionStore(game_id, initial, installed)

        self.logger.debug(f"Catalog for {game_id}: {[item.app_id for item in self.catalog]}")
        return list(self.catalog)

    def close(self) -> None:
        """Discard all dialog state."""
        if self.game_id is not None:
            self.logger.debug(f"Closing install dialog for {self.game_id}")
        self.game_id = None
        self.depots = {}
        self.catalog = []
        self.selection = None
        self.installed_app = None
        self.hidden_dlc_ids = set()

    def toggle(self, app_id: int, checked: bool) -> bool:
        """Check or uncheck an entry; locked and unknown entries are ignored."""
        return self._require_open().toggle(app_id, checked)

    def get_app_name(self, item: CatalogItem) -> str:
        """Display name of a catalog entry."""
        if item.app_id == self.game_id:
            name = self.source.get_app_name(item.app_id)
            return name or str(item.app_id)

        return self.source.get_app_name(item.app_id) or constants.DLC_NAME_TEMPLATE.format(app_id=item.app_id)

    def items(self) -> List[CatalogRow]:
        """Display rows in catalog order."""
        selection = self._require_open()
        return [
            CatalogRow(
                app_id=item.app_id,
                name=self.get_app_name(item),
                checked=selection.is_selected(item.app_id),
                enabled=not selection.is_locked(item.app_id),
                depot=item.depot
            )
            for item in self.catalog
        ]

    def get_size_summary(self) -> InstallSizeSnapshot:
        """Sizes of the current selection with a fresh free space reading."""
        selection = self._require_open()
        available_bytes = self.space_probe(self.storage_path)
        return compute_install_size(self.depots, selection, available_bytes, self.branch)

    def install_size_display(self) -> str:
        return str(self.get_size_summary())

    def can_confirm(self) -> bool:
        selection = self._require_open()
        return can_install(self.get_size_summary(), selection, self.installed_dlc_ids)

    def confirm(self) -> List[int]:
        """
        Build the install request for the current selection.

        Returns:
            DLC app IDs to install, empty if installing is not allowed
        """
        selection = self._require_open()

        if not self.can_confirm():
            self.logger.warning(f"Install not allowed for {self.game_id} with current selection")
            return []

        request = build_install_request(selection, self.game_id, self.hidden_dlc_ids)
        self.logger.info(f"Install request for {self.game_id}: {request}")

        if self.on_install is not None:
            self.on_install(request)

        return request
