"""
Essential apps — one WinGet install per action.

Action ids are the WinGet package ids, so a selection can be given
straight from `winget search` output.
"""

from __future__ import annotations

from functools import partial

from wintuner.actions.base import Action, ActionRegistry
from wintuner.engine.installer import install_package


# (label, WinGet package id)
ESSENTIAL_APPS: tuple[tuple[str, str], ...] = (
    ("Google Chrome",          "Google.Chrome"),
    ("Mozilla Firefox",        "Mozilla.Firefox"),
    ("Brave Browser",          "Brave.Brave"),
    ("7-Zip",                  "7zip.7zip"),
    ("Notepad++",              "Notepad++.Notepad++"),
    ("Everything (Voidtools)", "voidtools.Everything"),
    ("Visual Studio Code",     "Microsoft.VisualStudioCode"),
    ("Git",                    "Git.Git"),
    ("VLC Media Player",       "VideoLAN.VLC"),
)


def build_app_registry(install_timeout: float | None = None) -> ActionRegistry:
    """Return a fresh registry with one install action per essential app."""
    registry = ActionRegistry()
    for label, package_id in ESSENTIAL_APPS:
        registry.register(Action(
            id=package_id,
            label=label,
            description=f"winget install --id {package_id}",
            operation=partial(install_package, package_id, timeout=install_timeout),
            category="app",
        ))
    return registry
