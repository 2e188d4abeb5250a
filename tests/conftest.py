"""Shared fixtures for dlc_manager tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from dlc_manager.constants import INVALID_APP_ID
from dlc_manager.models import DepotInfo, InstalledApp, ManifestInfo

GAME_ID = 1000
DLC_A = 10
DLC_B = 20
DLC_HIDDEN = 40


def make_depot(depot_id: int, dlc_app_id: int = INVALID_APP_ID, size: Optional[int] = None,
               download: Optional[int] = None, branch: str = "public") -> DepotInfo:
    """Build a depot with an optional manifest on one branch."""
    manifests = {}
    if size is not None:
        manifests[branch] = ManifestInfo(size=size, download=download if download is not None else size // 2)
    return DepotInfo(depot_id=depot_id, dlc_app_id=dlc_app_id, manifests=manifests)


class FakeSource:
    """In-memory app info source."""

    def __init__(self, depots: Dict[int, DepotInfo], installed: Optional[InstalledApp] = None,
                 indirect: Optional[List[int]] = None, hidden: Optional[List[int]] = None,
                 names: Optional[Dict[int, str]] = None) -> None:
        self.depots = depots
        self.installed = installed
        self.indirect = indirect or []
        self.hidden = hidden or []
        self.names = names or {}
        self.catalog_calls = 0

    def get_catalog(self, game_id: int) -> Dict[int, DepotInfo]:
        self.catalog_calls += 1
        return dict(self.depots)

    def get_installed_app(self, game_id: int) -> Optional[InstalledApp]:
        return self.installed

    def get_indirect_dlc_ids(self, game_id: int) -> List[int]:
        return list(self.indirect)

    def get_hidden_dlc_ids(self, game_id: int) -> List[int]:
        return list(self.hidden)

    def get_app_name(self, app_id: int) -> Optional[str]:
        return self.names.get(app_id)


@pytest.fixture
def depots() -> Dict[int, DepotInfo]:
    """Base game with two depots, DLC A split over two depots, DLC B with one."""
    return {
        1020: make_depot(1020, DLC_B, size=2000, download=1500),
        1001: make_depot(1001, size=1000, download=400),
        1011: make_depot(1011, DLC_A, size=300, download=100),
        1010: make_depot(1010, DLC_A, size=500, download=200),
        1002: make_depot(1002),
    }


@pytest.fixture
def source(depots: Dict[int, DepotInfo]) -> FakeSource:
    return FakeSource(depots, names={GAME_ID: "Example Game", DLC_A: "Soundtrack"})
