"""
WinGet install pipeline.

Same contract as run_actions, with a preflight step: before any install
is dispatched, `winget --version` must start and exit 0 within a couple
of seconds. If it does not, the whole batch is reported as a single
"tool_unavailable" outcome and nothing is installed. One clear diagnostic
beats N identical install failures.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from wintuner.actions.base import Action
from wintuner.engine.executor import ProgressCallback, RunResult, run_actions
from wintuner.errors import ActionFailure, ToolUnavailable

logger = logging.getLogger(__name__)


# ── Constants ─────────────────────────────────────────────────────────────────

WINGET = "winget"
PROBE_TIMEOUT = 2.0


# ── WinGet commands ───────────────────────────────────────────────────────────

def install_command(package_id: str) -> list[str]:
    """Argument list for a silent, non-interactive install of one package."""
    return [
        WINGET, "install",
        "--id", package_id,
        "--silent",
        "--accept-package-agreements",
        "--accept-source-agreements",
    ]


def is_winget_available(timeout: float = PROBE_TIMEOUT) -> bool:
    """Return True if `winget --version` exits 0 within `timeout` seconds."""
    try:
        proc = subprocess.run(
            [WINGET, "--version"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("WinGet probe failed: %s", e)
        return False
    return proc.returncode == 0


def require_winget(
    probe: Callable[[float], bool] | None = None,
    timeout: float = PROBE_TIMEOUT,
) -> None:
    """Raise ToolUnavailable unless the probe (default is_winget_available) passes."""
    probe = probe or is_winget_available
    if not probe(timeout):
        raise ToolUnavailable(WINGET, "WinGet is not available on this system.")


def install_package(package_id: str, timeout: float | None = None) -> None:
    """
    Install one package with WinGet and wait for it to exit.

    Raises ActionFailure on a nonzero exit status, a missing winget binary,
    or when `timeout` (seconds, None = wait forever) runs out.
    """
    cmd = install_command(package_id)
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        raise ActionFailure(f"winget timed out after {timeout:g}s") from None
    except FileNotFoundError:
        raise ActionFailure("winget not found") from None
    except OSError as e:
        raise ActionFailure(f"Could not start winget: {e}") from e

    if proc.returncode != 0:
        reason = f"winget exited with code {proc.returncode}"
        last = _last_line(proc.stdout) or _last_line(proc.stderr)
        if last:
            reason += f": {last}"
        raise ActionFailure(reason)


def _last_line(output: str | None) -> str:
    lines = [ln.strip() for ln in (output or "").splitlines() if ln.strip()]
    return lines[-1] if lines else ""


# ── Public API ────────────────────────────────────────────────────────────────

def run_installs(
    selection: Sequence[Action],
    on_progress: ProgressCallback | None = None,
    probe: Callable[[float], bool] | None = None,
    probe_timeout: float = PROBE_TIMEOUT,
) -> RunResult:
    """
    Availability-gated run_actions for install actions.

    An empty selection returns the empty result without probing.
    An unreachable WinGet returns RunResult.unavailable and runs nothing.
    """
    if not selection:
        return RunResult(total=0)

    try:
        require_winget(probe, probe_timeout)
    except ToolUnavailable as e:
        logger.warning("Skipping %d install(s): %s", len(selection), e.reason)
        return RunResult.unavailable(e.tool, e.reason)

    logger.debug("WinGet available; installing %d package(s)", len(selection))
    return run_actions(selection, on_progress)
