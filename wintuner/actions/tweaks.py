"""
System tweaks — each one writes a few per-user (or policy) registry values.

All values are REG_DWORD and missing keys are created. winreg is imported
when a tweak actually runs, so the catalog can be built and listed on any
platform; off Windows every tweak fails with an ActionFailure.

Edge removal lives here too but is not a catalog entry: it is advanced,
needs admin rights and is only ever run after an explicit confirmation.
"""

from __future__ import annotations

import logging
import subprocess
from functools import partial
from pathlib import Path
from typing import Literal

from wintuner.actions.base import Action, ActionRegistry
from wintuner.errors import ActionFailure, AdminRequired
from wintuner.system_info import is_admin

logger = logging.getLogger(__name__)

Hive = Literal["HKCU", "HKLM"]

_HIVES: dict[str, str] = {
    "HKCU": "HKEY_CURRENT_USER",
    "HKLM": "HKEY_LOCAL_MACHINE",
}

_EXPLORER_ADVANCED = r"Software\Microsoft\Windows\CurrentVersion\Explorer\Advanced"
_COPILOT_POLICY = r"SOFTWARE\Policies\Microsoft\Windows\WindowsCopilot"

EDGE_APPLICATION_DIR = Path(r"C:\Program Files (x86)\Microsoft\Edge\Application")


# ── Registry helpers ──────────────────────────────────────────────────────────

def _winreg():
    try:
        import winreg
    except ImportError:
        raise ActionFailure("Windows registry is not available on this platform") from None
    return winreg


def set_dword(hive: Hive, path: str, name: str, value: int) -> None:
    """Create hive\\path if needed and set name to a REG_DWORD value."""
    winreg = _winreg()
    root = getattr(winreg, _HIVES[hive])
    logger.debug("Setting %s\\%s\\%s = %d", hive, path, name, value)
    try:
        with winreg.CreateKeyEx(root, path, 0, winreg.KEY_SET_VALUE) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_DWORD, value)
    except OSError as e:
        raise ActionFailure(f"Could not write {hive}\\{path}\\{name}: {e}") from e


def restart_explorer() -> None:
    """Kill every explorer.exe and start a fresh shell so taskbar changes show."""
    try:
        subprocess.run(
            ["taskkill", "/f", "/im", "explorer.exe"],
            capture_output=True, text=True, timeout=10, check=False,
        )
        subprocess.Popen(["explorer.exe"])
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ActionFailure(f"Could not restart Explorer: {e}") from e


def disable_copilot(admin: bool | None = None) -> None:
    """
    Turn off Windows Copilot.

    The policy goes machine-wide when running as admin, per-user otherwise.
    The taskbar button is always hidden for the current user.
    """
    if admin is None:
        admin = is_admin()
    set_dword("HKLM" if admin else "HKCU", _COPILOT_POLICY, "TurnOffWindowsCopilot", 1)
    set_dword("HKCU", _EXPLORER_ADVANCED, "ShowCopilotButton", 0)
    restart_explorer()


# ── Catalog ───────────────────────────────────────────────────────────────────

# (id, label, description, HKCU key path, value name, value)
_SIMPLE_TWEAKS: tuple[tuple[str, str, str, str, str, int], ...] = (
    (
        "disable_advertising_id",
        "Disable Advertising ID",
        "Stops apps from using your advertising ID for personalised ads.",
        r"Software\Microsoft\Windows\CurrentVersion\AdvertisingInfo",
        "Enabled", 0,
    ),
    (
        "show_file_extensions",
        "Show File Extensions",
        "Shows extensions like .exe and .pdf in File Explorer.",
        _EXPLORER_ADVANCED,
        "HideFileExt", 0,
    ),
    (
        "disable_windows_tips",
        "Disable Windows Tips",
        "Turns off tips, tricks and suggestions notifications.",
        r"Software\Microsoft\Windows\CurrentVersion\ContentDeliveryManager",
        "SubscribedContent-338388Enabled", 0,
    ),
    (
        "disable_bing_search",
        "Disable Bing Search in Start Menu",
        "Keeps Start menu searches local instead of sending them to Bing.",
        r"Software\Microsoft\Windows\CurrentVersion\Search",
        "BingSearchEnabled", 0,
    ),
)


def build_tweak_registry() -> ActionRegistry:
    """Return a fresh registry holding every system tweak, in display order."""
    registry = ActionRegistry()
    for action_id, label, description, path, name, value in _SIMPLE_TWEAKS:
        registry.register(Action(
            id=action_id,
            label=label,
            description=description,
            operation=partial(set_dword, "HKCU", path, name, value),
            recommended=True,
        ))
    registry.register(Action(
        id="disable_copilot",
        label="Disable Windows Copilot",
        description="Applies the Copilot off policy and hides the taskbar button. Restarts Explorer.",
        operation=disable_copilot,
        recommended=True,
    ))
    return registry


# ── Edge removal ──────────────────────────────────────────────────────────────

def find_edge_installer(app_dir: Path = EDGE_APPLICATION_DIR) -> Path:
    """Return setup.exe from the newest installed Edge version directory."""
    try:
        candidates = sorted(
            (d / "Installer" / "setup.exe" for d in app_dir.iterdir() if d.is_dir()),
            key=lambda p: _version_key(p.parent.parent.name),
        )
    except OSError as e:
        raise ActionFailure(f"Microsoft Edge not found in {app_dir}: {e}") from e

    installers = [p for p in candidates if p.is_file()]
    if not installers:
        raise ActionFailure(f"No Edge installer found under {app_dir}")
    return installers[-1]


def _version_key(name: str) -> tuple[int, ...]:
    parts = []
    for part in name.split("."):
        if not part.isdigit():
            return ()
        parts.append(int(part))
    return tuple(parts)


def remove_edge(app_dir: Path = EDGE_APPLICATION_DIR, admin: bool | None = None) -> Path:
    """
    Launch Edge's own uninstaller at system level.

    Returns the installer path that was started. Windows Update may
    reinstall Edge later.
    """
    if admin is None:
        admin = is_admin()
    if not admin:
        raise AdminRequired("Removing Microsoft Edge")

    installer = find_edge_installer(app_dir)
    logger.info("Starting Edge uninstaller: %s", installer)
    try:
        subprocess.Popen(
            [str(installer), "--uninstall", "--system-level", "--force-uninstall"],
        )
    except OSError as e:
        raise ActionFailure(f"Failed to start Edge uninstaller: {e}") from e
    return installer
