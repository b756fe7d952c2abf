"""
Header banner — app name, version, Windows build and privilege level.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from wintuner.system_info import get_system_info
from wintuner.ui.theme import (
    APP_NAME,
    APP_TAGLINE,
    APP_VERSION,
    COLOR_BRAND,
    COLOR_DIM,
    COLOR_TEXT,
    ICON_LOCK,
)


def print_header(console: Console) -> None:
    info = get_system_info()

    t = Text()
    t.append(f"  {APP_NAME}", style=f"bold {COLOR_BRAND}")
    t.append(f"  v{APP_VERSION}", style=COLOR_DIM)
    t.append(f"  ·  {APP_TAGLINE}\n", style=COLOR_TEXT)

    if info["version"]:
        edition = "Windows 11" if info["is_windows_11"] else "Windows"
        t.append(f"  {edition} {info['version']}  ·  {info['machine']}", style=COLOR_DIM)
    else:
        t.append(f"  {info['platform']}  ·  not Windows, tweaks will fail", style="warning")

    if info["admin"]:
        t.append(f"  ·  {ICON_LOCK} Administrator", style=COLOR_DIM)

    console.print(Panel(t, border_style=COLOR_BRAND, padding=(0, 1)))
