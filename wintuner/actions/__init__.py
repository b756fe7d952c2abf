"""
Action catalogs for WinTuner.

Modules:
  base.py   — Action record and ActionRegistry (lookup, recommended, by id).
  tweaks.py — registry-backed system tweaks, plus Edge removal.
  apps.py   — WinGet app installs.
"""
