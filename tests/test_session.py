"""Tests for the host-facing game manager session."""

from __future__ import annotations

from typing import List

import pytest

from dlc_manager.models import InstalledApp
from dlc_manager.session import GameManagerSession, SessionError

from conftest import DLC_A, DLC_B, DLC_HIDDEN, GAME_ID, FakeSource, make_depot


def _session(source, free: int = 10 ** 9, **kwargs) -> GameManagerSession:
    return GameManagerSession(source, storage_path="/games", space_probe=lambda path: free, **kwargs)


def test_open_builds_catalog_and_default_selection(source: FakeSource) -> None:
    """Verify open() lists base game and DLC with defaults applied."""
    source.indirect = [DLC_B]
    session = _session(source)

    items = session.open(GAME_ID)

    assert [item.app_id for item in items] == [GAME_ID, DLC_A, DLC_B]
    assert session.is_open is True
    assert session.selection.as_dict() == {GAME_ID: True, DLC_A: True, DLC_B: False}


def test_reopen_discards_previous_toggles(source: FakeSource) -> None:
    """Verify every open() rebuilds the selection from defaults."""
    session = _session(source)
    session.open(GAME_ID)
    session.toggle(DLC_A, False)

    session.open(GAME_ID)

    assert session.selection.is_selected(DLC_A) is True
    assert source.catalog_calls == 2


def test_items_expose_names_and_enabled_flags(source: FakeSource) -> None:
    """Verify display rows carry names, fallbacks and lock state."""
    source.installed = InstalledApp(app_id=GAME_ID, dlc_depots={DLC_A})
    session = _session(source)
    session.open(GAME_ID)

    rows = session.items()

    assert [(row.name, row.enabled) for row in rows] == [
        ("Example Game", False),
        ("Soundtrack", False),
        ("DLC 20", True),
    ]
    assert rows[1].label(debug=True) == "Soundtrack\ndepotId: 1010, dlcAppId: 10"


def test_size_summary_queries_probe_every_time(source: FakeSource) -> None:
    """Verify free space is read fresh on each summary."""
    readings = iter([5000, 100])
    paths: List[str] = []

    def probe(path: str) -> int:
        paths.append(path)
        return next(readings)

    session = GameManagerSession(source, storage_path="/games", space_probe=probe)
    session.open(GAME_ID)

    assert session.get_size_summary().available_bytes == 5000
    assert session.get_size_summary().available_bytes == 100
    assert paths == ["/games", "/games"]


def test_size_summary_is_idempotent(source: FakeSource) -> None:
    """Verify two summaries without mutation are equal."""
    session = _session(source)
    session.open(GAME_ID)

    assert session.get_size_summary() == session.get_size_summary()
    assert session.get_size_summary().install_bytes == 1000 + 800 + 2000


def test_confirm_returns_request_and_calls_installer() -> None:
    """Verify confirm() filters hidden DLC and invokes the install callback."""
    depots = {
        1: make_depot(1, size=100),
        2: make_depot(2, DLC_A, size=10),
        3: make_depot(3, DLC_HIDDEN, size=10),
    }
    installed: List[List[int]] = []
    session = _session(FakeSource(depots, hidden=[DLC_HIDDEN]), on_install=installed.append)
    session.open(GAME_ID)

    assert session.can_confirm() is True
    assert session.confirm() == [DLC_A]
    assert installed == [[DLC_A]]


def test_confirm_is_empty_when_not_allowed(source: FakeSource) -> None:
    """Verify confirm() refuses when the gate is closed."""
    installed: List[List[int]] = []
    session = _session(source, free=10, on_install=installed.append)
    session.open(GAME_ID)

    assert session.can_confirm() is False
    assert session.confirm() == []
    assert installed == []


def test_update_with_nothing_new_can_not_confirm(source: FakeSource) -> None:
    """Verify an install that only keeps installed DLC is blocked."""
    source.installed = InstalledApp(app_id=GAME_ID, dlc_depots={DLC_A})
    source.indirect = [DLC_B]
    session = _session(source)
    session.open(GAME_ID)

    assert session.can_confirm() is False

    session.toggle(DLC_B, True)
    assert session.can_confirm() is True
    assert session.confirm() == [DLC_A, DLC_B]


def test_session_uses_environment_defaults(monkeypatch: pytest.MonkeyPatch, source: FakeSource) -> None:
    """Verify storage path and branch fall back to environment variables."""
    monkeypatch.setenv("DLC_MANAGER_STORAGE_PATH", "/mnt/games")
    monkeypatch.setenv("DLC_MANAGER_BRANCH", "beta")

    session = GameManagerSession(source)

    assert session.storage_path == "/mnt/games"
    assert session.branch == "beta"


def test_calls_before_open_raise(source: FakeSource) -> None:
    """Verify using a closed session is a host error."""
    session = _session(source)

    with pytest.raises(SessionError):
        session.toggle(DLC_A, True)

    session.open(GAME_ID)
    session.close()

    assert session.is_open is False
    with pytest.raises(SessionError):
        session.get_size_summary()
