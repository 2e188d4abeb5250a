"""
App info sources

JsonAppSource serves depot catalogs, install records and DLC lists from an
app-info JSON document, read from a local file or fetched over HTTP.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from dlc_manager import constants, utils
from dlc_manager.models import DepotInfo, InstalledApp


class SourceError(Exception):
    """Exception raised when an app info document can not be loaded."""
    pass


class JsonAppSource:
    """
    App info source backed by a JSON document.

    Document layout:
        {"apps": {"<appId>": {"name": ..., "depots": {...}, "installed": {...},
                             "indirectDlc": [...], "hiddenDlc": [...]}}}

    Missing apps and keys degrade to empty values.
    """

    def __init__(self, document: Dict[str, Any]):
        """
        Initialize the source.

        Args:
            document: Parsed app info document
        """
        self.logger = logging.getLogger("dlc_manager.sources")
        if not isinstance(document, dict):
            raise SourceError("App info document must be a JSON object")
        apps = document.get("apps")
        self.apps: Dict[str, Dict[str, Any]] = apps if isinstance(apps, dict) else {}

    @classmethod
    def from_file(cls, path: str) -> "JsonAppSource":
        """Load the document from a local JSON file."""
        try:
            with open(Path(path).expanduser(), "r", encoding="utf-8") as f:
                return cls(json.load(f))
        except (ValueError, IOError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise SourceError(f"Failed to load app info from {path}: {e}") from e

    @classmethod
    def from_url(cls, url: str, session: Optional[requests.Session] = None,
                 timeout: int = constants.DEFAULT_TIMEOUT) -> "JsonAppSource":
        """Fetch the document from an HTTP(S) URL."""
        from dlc_manager import __version__

        if session is None:
            session = requests.Session()
            session.headers.update({
                "User-Agent": constants.USER_AGENT.format(version=__version__)
            })

        document = utils.get_json(session, url, timeout=timeout)
        if document is None:
            raise SourceError(f"Failed to fetch app info from {url}")
        return cls(document)

    @classmethod
    def load(cls, location: str) -> "JsonAppSource":
        """Load from a URL or a file path, depending on the location."""
        if location.startswith(("http://", "https://")):
            return cls.from_url(location)
        return cls.from_file(location)

    def _app(self, app_id: int) -> Dict[str, Any]:
        app = self.apps.get(str(app_id))
        return app if isinstance(app, dict) else {}

    def _depots_json(self, game_id: int) -> Dict[str, Any]:
        depots = self._app(game_id).get("depots")
        return depots if isinstance(depots, dict) else {}

    def get_app_name(self, app_id: int) -> Optional[str]:
        return self._app(app_id).get("name")

    def get_catalog(self, game_id: int) -> Dict[int, DepotInfo]:
        """Depots of a game keyed by depot ID."""
        depots = {}
        for depot_id, depot_json in self._depots_json(game_id).items():
            try:
                depot = DepotInfo.from_json(int(depot_id), depot_json or {})
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Skipping malformed depot {depot_id} of {game_id}: {e}")
                continue
            depots[depot.depot_id] = depot

        self.logger.debug(f"Loaded {len(depots)} depots for {game_id}")
        return depots

    def _app_ids(self, values: Any, game_id: int, key: str) -> List[int]:
        """Parse a list of app IDs, skipping entries that are not numbers."""
        if not isinstance(values, list):
            if values:
                self.logger.warning(f"Ignoring malformed {key} of {game_id}: {values!r}")
            return []

        app_ids = []
        for value in values:
            try:
                app_ids.append(int(value))
            except (TypeError, ValueError):
                self.logger.warning(f"Skipping malformed app ID {value!r} in {key} of {game_id}")
        return app_ids

    def get_installed_app(self, game_id: int) -> Optional[InstalledApp]:
        """
        Prior install record, None when the game is not installed.

        A record that is not an object counts as an install without DLC.
        """
        installed = self._app(game_id).get("installed")
        if installed is None:
            return None
        if not isinstance(installed, dict):
            self.logger.warning(f"Install record of {game_id} is not an object, assuming no DLC")
            installed = {}
        return InstalledApp(
            app_id=game_id,
            dlc_depots=set(self._app_ids(installed.get("dlcDepots"), game_id, "dlcDepots"))
        )

    def get_indirect_dlc_ids(self, game_id: int) -> List[int]:
        return self._app_ids(self._app(game_id).get("indirectDlc"), game_id, "indirectDlc")

    def get_hidden_dlc_ids(self, game_id: int) -> List[int]:
        """
        Hidden DLC IDs of a game.

        IDs that appear as keys of the game's depot mapping are dropped,
        matching how the catalog service reports hidden DLC.
        """
        depot_keys = {str(key) for key in self._depots_json(game_id)}
        hidden = self._app_ids(self._app(game_id).get("hiddenDlc"), game_id, "hiddenDlc")
        return [app_id for app_id in hidden if str(app_id) not in depot_keys]
