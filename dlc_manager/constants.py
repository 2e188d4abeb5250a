"""
Constants for depot catalogs, size branches and session configuration
"""

from pathlib import Path

# Sentinel dlcAppId for depots that belong to the base game (Int.MAX in the catalog service)
INVALID_APP_ID = 2147483647

# Distribution branch used for size lookups
DEFAULT_BRANCH = "public"

# Install root probed for free space
DEFAULT_STORAGE_PATH = str(Path.home() / "Games")

# Environment overrides
ENV_STORAGE_PATH = "DLC_MANAGER_STORAGE_PATH"
ENV_BRANCH = "DLC_MANAGER_BRANCH"
ENV_FORCE_ASCII = "FORCE_ASCII"

# Remote source defaults
DEFAULT_TIMEOUT = 10

# User agent
USER_AGENT = "dlc-manager/{version} (Python)"

# Binary size labels (1024 steps)
SIZE_LABELS = {0: "B", 1: "KiB", 2: "MiB", 3: "GiB", 4: "TiB"}

# Name shown for DLC the source has no name for
DLC_NAME_TEMPLATE = "DLC {app_id}"
