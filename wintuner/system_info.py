"""
Windows system detection — platform, version, privileges, appearance.

Every lookup here is a plain OS query. None of them raises: on any error
they fall back to a safe default.
"""

import ctypes
import platform
import sys
from functools import lru_cache
from typing import Any


IS_WINDOWS: bool = sys.platform == "win32"

WINDOWS_VERSION_STRING: str = platform.version() if IS_WINDOWS else ""  # e.g. "10.0.22631"

_PERSONALIZE_KEY = r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize"


def is_admin() -> bool:
    """Return True if the current process runs with administrator rights."""
    if not IS_WINDOWS:
        return False
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except Exception:
        return False


def is_dark_mode() -> bool:
    """
    Return True when Windows apps use the dark theme.

    AppsUseLightTheme == 0 means dark. A missing key or any registry error
    means light.
    """
    if not IS_WINDOWS:
        return False
    try:
        import winreg

        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, _PERSONALIZE_KEY) as key:
            value, _kind = winreg.QueryValueEx(key, "AppsUseLightTheme")
        return value == 0
    except OSError:
        return False


def windows_build() -> int:
    """Return the Windows build number (22000+ is Windows 11), 0 if unknown."""
    try:
        return int(WINDOWS_VERSION_STRING.split(".")[2])
    except (IndexError, ValueError):
        return 0


@lru_cache(maxsize=1)
def get_system_info() -> dict[str, Any]:
    """
    Return a dict describing this machine.

    Keys:
        platform        "Windows" | "Linux" | ...
        version         "10.0.22631"
        build           22631
        is_windows_11   True | False
        machine         "AMD64" | "ARM64"
        hostname        "DESKTOP-1234"
        admin           True | False
    """
    build = windows_build()
    return {
        "platform": platform.system(),
        "version": WINDOWS_VERSION_STRING,
        "build": build,
        "is_windows_11": build >= 22000,
        "machine": platform.machine(),
        "hostname": platform.node(),
        "admin": is_admin(),
    }
