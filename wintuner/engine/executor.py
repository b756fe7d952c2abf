"""
Execution engine — run a selection of actions one at a time.

For every action, in selection order:
  1. Submit its operation to a single background worker and wait for it
  2. Record "succeeded", or "failed" with the exception text
  3. Deliver a ProgressEvent to the caller before the next action starts

An action that raises never stops the batch and never escapes run_actions.
Only one action is in flight at any moment: tweaks write shared system
settings, so they must not overlap.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Literal

from wintuner.actions.base import Action

logger = logging.getLogger(__name__)

Status = Literal["succeeded", "failed", "tool_unavailable"]


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Outcome:
    action_id: str
    status: Status
    reason: str = ""            # Empty on success
    duration: float = 0.0       # Seconds spent in the operation

    @property
    def succeeded(self) -> bool:
        return self.status == "succeeded"


@dataclass(frozen=True)
class ProgressEvent:
    index: int                  # 1-based: this is the index-th completed action
    total: int
    action_id: str
    status: Status
    reason: str = ""

    @property
    def fraction(self) -> float:
        return self.index / self.total if self.total else 1.0


@dataclass
class RunResult:
    total: int
    outcomes: list[Outcome] = field(default_factory=list)

    @property
    def completed_count(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded_count(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)

    @property
    def failures(self) -> list[Outcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def is_empty(self) -> bool:
        """Nothing was selected. Not a success and not a failure."""
        return self.total == 0

    @property
    def tool_unavailable(self) -> bool:
        return any(o.status == "tool_unavailable" for o in self.outcomes)

    @property
    def ok(self) -> bool:
        return not self.is_empty and self.failed_count == 0

    def summary(self) -> str:
        """One-line tally, e.g. '8 of 9 succeeded, 1 failed'."""
        if self.is_empty:
            return "Nothing to do"
        if self.tool_unavailable:
            return self.outcomes[0].reason
        text = f"{self.succeeded_count} of {self.total} succeeded"
        if self.failed_count:
            text += f", {self.failed_count} failed"
        return text

    @classmethod
    def unavailable(cls, tool: str, reason: str) -> "RunResult":
        """A batch that never started because `tool` is missing."""
        return cls(total=1, outcomes=[Outcome(tool, "tool_unavailable", reason)])


ProgressCallback = Callable[[ProgressEvent], None]


# ── Public API ────────────────────────────────────────────────────────────────

def run_actions(
    selection: Sequence[Action],
    on_progress: ProgressCallback | None = None,
) -> RunResult:
    """
    Run every action in `selection` exactly once, in order.

    Args:
        selection:   Actions to run. May be empty.
        on_progress: Called on the calling thread after each action finishes,
                     before the next one starts. Exceptions it raises propagate.

    Returns a RunResult with one Outcome per action, in selection order.
    An empty selection returns at once with total=0 and emits no events.
    """
    total = len(selection)
    result = RunResult(total=total)
    if not total:
        logger.debug("Empty selection; nothing to run")
        return result

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="wintuner-action") as worker:
        for index, action in enumerate(selection, 1):
            outcome = _run_one(worker, action)
            result.outcomes.append(outcome)

            if on_progress is not None:
                on_progress(ProgressEvent(
                    index=index,
                    total=total,
                    action_id=action.id,
                    status=outcome.status,
                    reason=outcome.reason,
                ))

    logger.info("Run finished: %s", result.summary())
    return result


# ── Internal ──────────────────────────────────────────────────────────────────

def _run_one(worker: ThreadPoolExecutor, action: Action) -> Outcome:
    """Run one operation on the worker and turn whatever happens into an Outcome."""
    logger.debug("Dispatching %s", action.id)
    start = time.monotonic()
    future = worker.submit(action.operation)
    try:
        future.result()
    except Exception as e:
        elapsed = time.monotonic() - start
        reason = _describe(e)
        logger.warning("Action %s failed: %s", action.id, reason)
        return Outcome(action.id, "failed", reason, elapsed)

    return Outcome(action.id, "succeeded", "", time.monotonic() - start)


def _describe(exc: BaseException) -> str:
    """Exception message, or its class name when the message is empty."""
    text = str(exc).strip()
    return text or type(exc).__name__
