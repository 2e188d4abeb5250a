"""
Data models for depots, catalog items and install size snapshots
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Any

from dlc_manager import constants, utils


def _to_int(value: Any) -> int:
    """Coerce a JSON number (possibly a string or null) to int."""
    try:
        return int(value) if value else 0
    except (TypeError, ValueError):
        return 0


@dataclass
class ManifestInfo:
    """
    Size metadata for a depot on one distribution branch.

    Attributes:
        size: Installed size in bytes
        download: Download size in bytes
    """
    size: int = 0
    download: int = 0

    @classmethod
    def from_json(cls, manifest_json: Dict[str, Any]) -> "ManifestInfo":
        """Create a ManifestInfo from JSON data, zero sizes if it is not an object."""
        if not isinstance(manifest_json, dict):
            return cls()
        return cls(
            size=_to_int(manifest_json.get("size", 0)),
            download=_to_int(manifest_json.get("download", 0))
        )


@dataclass
class DepotInfo:
    """
    Represents a content depot of a game title.

    Attributes:
        depot_id: Depot ID
        dlc_app_id: DLC app this depot belongs to, INVALID_APP_ID for the base game
        manifests: Manifest sizes keyed by branch name
    """
    depot_id: int
    dlc_app_id: int = constants.INVALID_APP_ID
    manifests: Dict[str, ManifestInfo] = field(default_factory=dict)

    @property
    def is_base(self) -> bool:
        return self.dlc_app_id == constants.INVALID_APP_ID

    def size_for(self, branch: str = constants.DEFAULT_BRANCH) -> int:
        """Installed size on a branch, 0 when the branch has no manifest."""
        manifest = self.manifests.get(branch)
        return manifest.size if manifest else 0

    def download_for(self, branch: str = constants.DEFAULT_BRANCH) -> int:
        """Download size on a branch, 0 when the branch has no manifest."""
        manifest = self.manifests.get(branch)
        return manifest.download if manifest else 0

    @classmethod
    def from_json(cls, depot_id: int, depot_json: Dict[str, Any]) -> "DepotInfo":
        """
        Create a DepotInfo from JSON data.

        A missing or null dlcAppId marks a base game depot.
        """
        if not isinstance(depot_json, dict):
            raise ValueError(f"depot {depot_id} is not an object")

        dlc_app_id = depot_json.get("dlcAppId")
        manifests_json = depot_json.get("manifests")
        if not isinstance(manifests_json, dict):
            manifests_json = {}
        manifests = {
            branch: ManifestInfo.from_json(manifest_json)
            for branch, manifest_json in manifests_json.items()
        }
        return cls(
            depot_id=int(depot_id),
            dlc_app_id=constants.INVALID_APP_ID if dlc_app_id is None else int(dlc_app_id),
            manifests=manifests
        )


@dataclass
class CatalogItem:
    """
    One selectable entry of the install dialog.

    Attributes:
        app_id: Game ID for the base entry, DLC app ID otherwise
        depot: Representative depot (first by depot ID); None for a base
            game without base depots
    """
    app_id: int
    depot: Optional[DepotInfo] = None


@dataclass
class InstalledApp:
    """Prior installation record of a game title."""
    app_id: int
    dlc_depots: Set[int] = field(default_factory=set)


@dataclass(frozen=True)
class InstallSizeSnapshot:
    """
    Download/install footprint of the current selection.

    Attributes:
        download_bytes: Bytes to download (base game + selected DLC)
        install_bytes: Bytes on disk after install
        available_bytes: Free space at the install root
    """
    download_bytes: int = 0
    install_bytes: int = 0
    available_bytes: int = 0

    @property
    def has_enough_space(self) -> bool:
        return self.available_bytes >= self.install_bytes

    @property
    def download_size(self) -> str:
        return utils.format_binary_size(self.download_bytes)

    @property
    def install_size(self) -> str:
        return utils.format_binary_size(self.install_bytes)

    @property
    def available_space(self) -> str:
        return utils.format_binary_size(self.available_bytes)

    def __str__(self) -> str:
        return (f"Download: {self.download_size}, Install: {self.install_size}, "
                f"Available: {self.available_space}")
