"""
Tests for actions/tweaks.py.

A fake `winreg` module is installed in sys.modules so registry writes can
be asserted on any platform.

Covers:
  - build_tweak_registry: ids, order, recommended flags
  - set_dword: key creation, REG_DWORD, OSError wrapping, missing winreg
  - disable_copilot: HKLM vs HKCU policy, Explorer restart
  - Edge removal: admin gate, installer discovery, launch arguments
"""

import sys
import types
from unittest.mock import MagicMock, patch

import pytest

from wintuner.actions import tweaks
from wintuner.actions.tweaks import (
    build_tweak_registry,
    disable_copilot,
    find_edge_installer,
    remove_edge,
    set_dword,
)
from wintuner.errors import ActionFailure, AdminRequired


# ── Fake winreg ───────────────────────────────────────────────────────────────

class _FakeKey:
    def __init__(self, store: dict, root: str, path: str) -> None:
        self.store, self.root, self.path = store, root, path

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


@pytest.fixture
def fake_winreg(monkeypatch):
    """Install a minimal winreg stand-in; returns the dict of written values."""
    store: dict = {}
    mod = types.ModuleType("winreg")
    mod.HKEY_CURRENT_USER = "HKCU"
    mod.HKEY_LOCAL_MACHINE = "HKLM"
    mod.KEY_SET_VALUE = 2
    mod.REG_DWORD = 4

    def create_key_ex(root, path, reserved, access):
        return _FakeKey(store, root, path)

    def set_value_ex(key, name, reserved, kind, value):
        store[(key.root, key.path, name)] = (kind, value)

    mod.CreateKeyEx = create_key_ex
    mod.SetValueEx = set_value_ex
    monkeypatch.setitem(sys.modules, "winreg", mod)
    return store


# ── Catalog ───────────────────────────────────────────────────────────────────

class TestTweakRegistry:
    def test_catalog_ids_in_display_order(self):
        assert build_tweak_registry().ids() == [
            "disable_advertising_id",
            "show_file_extensions",
            "disable_windows_tips",
            "disable_bing_search",
            "disable_copilot",
        ]

    def test_every_tweak_is_recommended(self):
        reg = build_tweak_registry()
        assert reg.select_recommended() == reg.all()

    def test_every_tweak_has_label_and_description(self):
        for action in build_tweak_registry():
            assert action.label
            assert action.description
            assert action.category == "tweak"

    def test_each_call_builds_a_fresh_registry(self):
        assert build_tweak_registry() is not build_tweak_registry()

    def test_show_file_extensions_writes_hide_file_ext(self, fake_winreg):
        build_tweak_registry().get("show_file_extensions").operation()
        key = ("HKCU", tweaks._EXPLORER_ADVANCED, "HideFileExt")
        assert fake_winreg[key] == (4, 0)

    def test_disable_bing_search_writes_value(self, fake_winreg):
        build_tweak_registry().get("disable_bing_search").operation()
        key = ("HKCU", r"Software\Microsoft\Windows\CurrentVersion\Search", "BingSearchEnabled")
        assert fake_winreg[key] == (4, 0)


# ── set_dword ─────────────────────────────────────────────────────────────────

class TestSetDword:
    def test_writes_reg_dword(self, fake_winreg):
        set_dword("HKLM", r"SOFTWARE\Test", "Value", 1)
        assert fake_winreg[("HKLM", r"SOFTWARE\Test", "Value")] == (4, 1)

    def test_os_error_becomes_action_failure(self, fake_winreg):
        def denied(*args):
            raise PermissionError("Access is denied")

        sys.modules["winreg"].CreateKeyEx = denied
        with pytest.raises(ActionFailure, match="Access is denied"):
            set_dword("HKLM", r"SOFTWARE\Test", "Value", 1)

    def test_missing_winreg_is_action_failure(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "winreg", None)
        with pytest.raises(ActionFailure, match="not available on this platform"):
            set_dword("HKCU", r"Software\Test", "Value", 0)


# ── disable_copilot ───────────────────────────────────────────────────────────

class TestDisableCopilot:
    def test_admin_writes_machine_policy(self, fake_winreg):
        with patch.object(tweaks, "restart_explorer") as restart:
            disable_copilot(admin=True)
        assert fake_winreg[("HKLM", tweaks._COPILOT_POLICY, "TurnOffWindowsCopilot")] == (4, 1)
        assert fake_winreg[("HKCU", tweaks._EXPLORER_ADVANCED, "ShowCopilotButton")] == (4, 0)
        restart.assert_called_once()

    def test_non_admin_writes_user_policy(self, fake_winreg):
        with patch.object(tweaks, "restart_explorer"):
            disable_copilot(admin=False)
        assert ("HKCU", tweaks._COPILOT_POLICY, "TurnOffWindowsCopilot") in fake_winreg
        assert ("HKLM", tweaks._COPILOT_POLICY, "TurnOffWindowsCopilot") not in fake_winreg

    def test_restart_failure_is_action_failure(self):
        with patch("wintuner.actions.tweaks.subprocess.run"), \
                patch("wintuner.actions.tweaks.subprocess.Popen", side_effect=FileNotFoundError("explorer.exe")):
            with pytest.raises(ActionFailure, match="Explorer"):
                tweaks.restart_explorer()


# ── Edge removal ──────────────────────────────────────────────────────────────

def _edge_tree(root, *versions):
    for v in versions:
        installer = root / v / "Installer"
        installer.mkdir(parents=True)
        (installer / "setup.exe").write_bytes(b"")
    return root


class TestEdgeRemoval:
    def test_requires_admin(self, tmp_path):
        with pytest.raises(AdminRequired):
            remove_edge(app_dir=tmp_path, admin=False)

    def test_picks_newest_version(self, tmp_path):
        _edge_tree(tmp_path, "119.0.2151.97", "120.0.2210.61", "99.0.1")
        assert find_edge_installer(tmp_path).parent.parent.name == "120.0.2210.61"

    def test_missing_folder_is_action_failure(self, tmp_path):
        with pytest.raises(ActionFailure):
            find_edge_installer(tmp_path / "nope")

    def test_folder_without_installer_is_action_failure(self, tmp_path):
        (tmp_path / "120.0.1").mkdir()
        with pytest.raises(ActionFailure, match="No Edge installer"):
            find_edge_installer(tmp_path)

    def test_launches_uninstaller(self, tmp_path):
        _edge_tree(tmp_path, "120.0.2210.61")
        with patch("wintuner.actions.tweaks.subprocess.Popen") as popen:
            installer = remove_edge(app_dir=tmp_path, admin=True)
        args = popen.call_args.args[0]
        assert args[0] == str(installer)
        assert args[1:] == ["--uninstall", "--system-level", "--force-uninstall"]
