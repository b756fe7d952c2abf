"""
Action execution subsystem for WinTuner.

Modules:
  executor.py  — run_actions: serial, worker-thread execution of a selection
                 with per-action failure isolation and a progress callback.
  installer.py — WinGet install pipeline: availability probe, install
                 command, run_installs (probe-gated run_actions).
  runner.py    — console session: confirm, narrate progress, print summary.
"""
