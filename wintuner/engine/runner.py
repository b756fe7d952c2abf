"""
Console session for one batch — tweaks or installs.

Each session:
  - prints a section title
  - with dry_run, lists what would run and stops
  - otherwise runs the batch through the engine under a RunNarrator
  - prints a summary panel and returns the RunResult

Tweaks go through run_actions; installs go through run_installs, which
probes WinGet first.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.console import Console

from wintuner.actions.base import Action
from wintuner.engine.executor import ProgressCallback, RunResult, run_actions
from wintuner.engine.installer import run_installs
from wintuner.ui.narrator import RunNarrator
from wintuner.ui.report import print_plan, print_run_summary, section_title

Runner = Callable[[Sequence[Action], ProgressCallback | None], RunResult]


# ── Public API ────────────────────────────────────────────────────────────────

def run_tweak_session(
    selection: Sequence[Action], console: Console, dry_run: bool = False,
) -> RunResult | None:
    """Apply the selected tweaks. Returns None for a dry run."""
    return _run_session(
        selection, console, run_actions,
        title="Applying tweaks", done_title="Tweak run complete",
        noun="tweaks", dry_run=dry_run,
    )


def run_install_session(
    selection: Sequence[Action],
    console: Console,
    dry_run: bool = False,
) -> RunResult | None:
    """Install the selected apps with WinGet. Returns None for a dry run."""
    return _run_session(
        selection, console, run_installs,
        title="Installing applications", done_title="Install run complete",
        noun="apps", dry_run=dry_run,
    )


# ── Internal ──────────────────────────────────────────────────────────────────

def _run_session(
    selection: Sequence[Action],
    console: Console,
    runner: Runner,
    title: str,
    done_title: str,
    noun: str,
    dry_run: bool,
) -> RunResult | None:
    labels = {a.id: a.label for a in selection}

    console.print()
    console.print(section_title(title))
    console.print()

    if dry_run:
        if selection:
            print_plan(console, [a.label for a in selection],
                       f"Would run {len(selection)} {noun}  [DRY RUN]")
        else:
            console.print(f"  [dim]No {noun} selected.[/dim]\n")
        return None

    if not selection:
        result = runner(selection, None)
    else:
        with RunNarrator(console, selection, noun=noun) as narrator:
            result = runner(selection, narrator.on_progress)

    print_run_summary(result, console, title=done_title, labels=labels)
    return result
