"""Tests for install action gating."""

from __future__ import annotations

from dlc_manager.gate import can_install
from dlc_manager.models import InstallSizeSnapshot
from dlc_manager.selection import SelectionStore

from conftest import DLC_A, DLC_B, GAME_ID

ENOUGH_SPACE = InstallSizeSnapshot(download_bytes=100, install_bytes=1500, available_bytes=10_000)


def _selection(*selected: int) -> SelectionStore:
    initial = {GAME_ID: True, DLC_A: False, DLC_B: False}
    initial.update({app_id: True for app_id in selected})
    return SelectionStore(GAME_ID, initial)


def test_insufficient_space_blocks_install() -> None:
    """Verify low free space blocks install regardless of selection."""
    snapshot = InstallSizeSnapshot(download_bytes=0, install_bytes=1500, available_bytes=1000)

    assert can_install(snapshot, _selection(DLC_A, DLC_B)) is False
    assert can_install(snapshot, _selection(DLC_A, DLC_B), installed_dlc_ids=set()) is False


def test_exact_space_is_enough() -> None:
    """Verify equal available and install bytes allow install."""
    snapshot = InstallSizeSnapshot(install_bytes=1500, available_bytes=1500)

    assert can_install(snapshot, _selection()) is True


def test_fresh_install_allows_base_game() -> None:
    """Verify a base-only fresh install is allowed, the base game counts as a selected entry."""
    assert can_install(ENOUGH_SPACE, _selection()) is True
    assert can_install(ENOUGH_SPACE, _selection(DLC_A)) is True


def test_install_record_without_dlc_needs_a_new_selection() -> None:
    """Verify an existing install with no DLC needs one DLC beyond the base game."""
    assert can_install(ENOUGH_SPACE, _selection(), installed_dlc_ids=set()) is False
    assert can_install(ENOUGH_SPACE, _selection(DLC_A), installed_dlc_ids=set()) is True


def test_update_needs_a_newly_selected_dlc() -> None:
    """Verify re-selecting only installed DLC blocks install."""
    assert can_install(ENOUGH_SPACE, _selection(DLC_A), installed_dlc_ids={DLC_A}) is False
    assert can_install(ENOUGH_SPACE, _selection(DLC_A, DLC_B), installed_dlc_ids={DLC_A}) is True
