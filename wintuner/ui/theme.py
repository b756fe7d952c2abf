"""
WinTuner visual design system.

All colors, styles, and icons as named constants.
Import from here — never hardcode markup strings in other modules.

Palette is picked at import time from the Windows app theme
(AppsUseLightTheme). Both palettes are 24-bit hex so Windows Terminal,
conhost and VS Code render them the same way.
"""

from rich.style import Style
from rich.theme import Theme

from wintuner import __version__
from wintuner.system_info import IS_WINDOWS, is_dark_mode


# ── Brand ─────────────────────────────────────────────────────────────────────

APP_NAME = "wintuner"
APP_TAGLINE = "Windows 11 Optimisation Utility"
APP_VERSION = __version__


# ── Dark/light detection ──────────────────────────────────────────────────────

# Off Windows there is no app theme to read; terminals are usually dark.
DARK_MODE: bool = is_dark_mode() if IS_WINDOWS else True


# ── Color palette ─────────────────────────────────────────────────────────────

if DARK_MODE:
    COLOR_FAILED   = "#E05252"      # Warm red
    COLOR_WARNING  = "#D4870A"      # Amber
    COLOR_SUCCESS  = "#4DBD74"      # Sage green
    COLOR_INFO     = "#5BA3C9"      # Slate blue
    COLOR_BRAND    = "#4C9BE8"      # Windows blue, lifted for dark backgrounds
    COLOR_DIM      = "#787878"
    COLOR_COMMAND  = "#C0C0C0"
    COLOR_TEXT     = "#F0F0F0"

    PROGRESS_BAR_COLOR      = "#4C9BE8"
    PROGRESS_COMPLETE_COLOR = "#4DBD74"

else:
    # WCAG AA (≥ 4.5:1) on white
    COLOR_FAILED   = "#B91C1C"
    COLOR_WARNING  = "#92400E"
    COLOR_SUCCESS  = "#166534"
    COLOR_INFO     = "#0369A1"
    COLOR_BRAND    = "#0A5FB4"
    COLOR_DIM      = "#4B5563"
    COLOR_COMMAND  = "#1F2937"
    COLOR_TEXT     = "#0F172A"

    PROGRESS_BAR_COLOR      = "#0A5FB4"
    PROGRESS_COMPLETE_COLOR = "#166534"


# ── Rich styles ───────────────────────────────────────────────────────────────

STYLE_FAILED   = Style(color=COLOR_FAILED,  bold=True)
STYLE_WARNING  = Style(color=COLOR_WARNING, bold=True)
STYLE_SUCCESS  = Style(color=COLOR_SUCCESS, bold=True)
STYLE_INFO     = Style(color=COLOR_INFO)
STYLE_BRAND    = Style(color=COLOR_BRAND,   bold=True)
STYLE_DIM      = Style(color=COLOR_DIM)


# ── Status icons ──────────────────────────────────────────────────────────────

ICON_SUCCESS = "✅"
ICON_FAILED = "❌"
ICON_UNAVAILABLE = "🚫"
ICON_RECOMMENDED = "⭐"
ICON_LOCK = "🔐"

STATUS_ICONS: dict[str, str] = {
    "succeeded": ICON_SUCCESS,
    "failed": ICON_FAILED,
    "tool_unavailable": ICON_UNAVAILABLE,
}

STATUS_STYLES: dict[str, Style] = {
    "succeeded": STYLE_SUCCESS,
    "failed": STYLE_FAILED,
    "tool_unavailable": STYLE_WARNING,
}


# ── Category labels ───────────────────────────────────────────────────────────

CATEGORY_TITLES: dict[str, str] = {
    "tweak": "🛠️  System Tweaks",
    "app": "📦 Essential Apps (WinGet)",
}


# ── Rich Theme ────────────────────────────────────────────────────────────────

WINTUNER_THEME = Theme(
    {
        "failed":  f"{COLOR_FAILED} bold",
        "warning": f"{COLOR_WARNING} bold",
        "success": f"{COLOR_SUCCESS} bold",
        "info":    COLOR_INFO,
        "brand":   f"{COLOR_BRAND} bold",
        "dim":     COLOR_DIM,
        "command": COLOR_COMMAND,
        "text":    COLOR_TEXT,
    }
)
