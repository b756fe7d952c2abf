"""
Exception taxonomy for WinTuner.

Registry misuse (DuplicateIdError, UnknownIdError) is raised to the caller
before any run starts. ActionFailure and ToolUnavailable are raised by
operations and probes, then captured by the engine and turned into
outcomes; they never escape a run.
"""

from __future__ import annotations

from collections.abc import Iterable


class WintunerError(Exception):
    """Base class for every error WinTuner raises on purpose."""


class DuplicateIdError(WintunerError):
    def __init__(self, action_id: str) -> None:
        self.action_id = action_id
        super().__init__(f"Action id already registered: {action_id}")


class UnknownIdError(WintunerError):
    def __init__(self, ids: Iterable[str]) -> None:
        self.ids = tuple(ids)
        super().__init__(f"Unknown action id(s): {', '.join(self.ids)}")


class ActionFailure(WintunerError):
    """One action's operation failed. `reason` is shown to the user."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ToolUnavailable(WintunerError):
    """An external tool a whole batch depends on cannot be reached."""

    def __init__(self, tool: str, reason: str = "") -> None:
        self.tool = tool
        self.reason = reason or f"{tool} is not available on this system"
        super().__init__(self.reason)


class AdminRequired(WintunerError):
    def __init__(self, what: str = "This operation") -> None:
        super().__init__(f"{what} requires administrator privileges")
