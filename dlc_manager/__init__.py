"""
DLC Manager - depot/DLC selection and install footprint engine

Builds the list of installable items of a game title (base game plus DLC)
from its depot catalog, tracks what the user selected, computes the
download and install sizes of that selection, gates the install action on
free space, and emits the DLC app IDs to hand to an installer.
"""

__version__ = "0.1.0"
__author__ = "dlc-manager Contributors"
__license__ = "MIT"

from dlc_manager.catalog import build_catalog
from dlc_manager.gate import can_install
from dlc_manager.models import CatalogItem, DepotInfo, InstallSizeSnapshot, InstalledApp, ManifestInfo
from dlc_manager.request import build_install_request
from dlc_manager.selection import SelectionStore
from dlc_manager.session import GameManagerSession, SessionError
from dlc_manager.sizes import compute_install_size
from dlc_manager.sources import JsonAppSource, SourceError

__all__ = [
    "build_catalog",
    "build_install_request",
    "can_install",
    "compute_install_size",
    "CatalogItem",
    "DepotInfo",
    "GameManagerSession",
    "InstallSizeSnapshot",
    "InstalledApp",
    "JsonAppSource",
    "ManifestInfo",
    "SelectionStore",
    "SessionError",
    "SourceError",
]
