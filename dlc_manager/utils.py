"""
Utility functions for size formatting, storage probing and terminal output
"""

import json
import logging
import os
import shutil
import sys
from typing import Optional, Tuple, Dict, Any

import requests

from dlc_manager import constants

logger = logging.getLogger("dlc_manager.utils")

SYMBOL_CHECK = '[OK]'
SYMBOL_ERROR = '[ERROR]'
SYMBOL_LOCKED = '[LOCKED]'
CHECKBOX_ON = '[x]'
CHECKBOX_OFF = '[ ]'


def detect_unicode_support(force_ascii=False):
    """
    Detect if the terminal supports Unicode output.

    Args:
        force_ascii: If True, force ASCII mode regardless of terminal support

    Returns:
        True if Unicode is supported, False otherwise
    """
    if force_ascii:
        return False

    if os.environ.get(constants.ENV_FORCE_ASCII, '').lower() in ('1', 'true', 'yes'):
        return False

    try:
        encoding = sys.stdout.encoding or ''
        if encoding.lower() in ('utf-8', 'utf8'):
            return True

        '☑'.encode(encoding)
        return True
    except (UnicodeEncodeError, AttributeError, LookupError):
        return False


def setup_symbols(force_ascii=False):
    """
    Set up symbol variables based on Unicode support.

    Args:
        force_ascii: If True, force ASCII mode
    """
    global SYMBOL_CHECK, SYMBOL_ERROR, SYMBOL_LOCKED, CHECKBOX_ON, CHECKBOX_OFF

    if detect_unicode_support(force_ascii):
        SYMBOL_CHECK = '✓'
        SYMBOL_ERROR = '✗'
        SYMBOL_LOCKED = '🔒'
        CHECKBOX_ON = '☑'
        CHECKBOX_OFF = '☐'
    else:
        SYMBOL_CHECK = '[OK]'
        SYMBOL_ERROR = '[ERROR]'
        SYMBOL_LOCKED = '[LOCKED]'
        CHECKBOX_ON = '[x]'
        CHECKBOX_OFF = '[ ]'


def get_readable_size(size_bytes: int) -> Tuple[float, str]:
    """
    Convert bytes to a value and binary unit label.

    Args:
        size_bytes: Size in bytes

    Returns:
        Tuple of (size value, unit string)
    """
    power = 1024
    n = 0

    size = float(size_bytes)
    while size >= power and n < 4:
        size /= power
        n += 1

    return round(size, 2), constants.SIZE_LABELS[n]


def format_binary_size(size_bytes: int) -> str:
    """
    Format bytes as human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.5 GiB", "512 B")
    """
    size, unit = get_readable_size(size_bytes)
    if unit == "B":
        return f"{int(size)} {unit}"
    return f"{size} {unit}"


def get_available_space(path: str) -> int:
    """
    Get free bytes on the filesystem holding a path.

    The install root may not exist yet, so the nearest existing
    parent directory is probed instead.

    Args:
        path: Install root to probe

    Returns:
        Free bytes, or 0 if the filesystem cannot be queried
    """
    root = os.path.abspath(os.path.expanduser(path))
    while not os.path.exists(root) and root != os.path.dirname(root):
        root = os.path.dirname(root)

    try:
        return shutil.disk_usage(root).free
    except OSError as e:
        logger.warning(f"Failed to query free space for {path}: {e}")
        return 0


def get_json(session: requests.Session, url: str,
             timeout: int = constants.DEFAULT_TIMEOUT) -> Optional[Dict[str, Any]]:
    """
    Fetch JSON data from a URL.

    Args:
        session: Requests session to use
        url: URL to fetch
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON data or None if request failed
    """
    try:
        response = session.get(url, headers={"Accept": "application/json"}, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, json.JSONDecodeError, ValueError) as e:
        logger.error(f"Failed to get JSON from {url}: {e}")
        return None
