"""
RunNarrator — live progress UI for one engine run.

Wraps rich.live.Live to show two layers:

  1. Finished actions — printed above as they complete (selection order)
  2. Progress area    — spinner + current action + progress bar (live)

Live refreshes from its own thread, so the spinner keeps moving while the
engine waits on a long install.

Usage:
    with RunNarrator(console, selection, noun="tweaks") as narrator:
        result = run_actions(selection, on_progress=narrator.on_progress)
"""

from collections.abc import Sequence

from rich.console import Console, Group
from rich.live import Live
from rich.padding import Padding
from rich.spinner import Spinner
from rich.text import Text

from wintuner.actions.base import Action
from wintuner.engine.executor import ProgressEvent
from wintuner.ui.progress import render_progress
from wintuner.ui.theme import COLOR_DIM, COLOR_TEXT, STATUS_ICONS, STATUS_STYLES


class RunNarrator:
    """
    Context manager that turns ProgressEvents into console output.

    Pass `narrator.on_progress` to the engine as the progress callback.
    """

    def __init__(self, console: Console, selection: Sequence[Action], noun: str = "actions") -> None:
        self.console = console
        self.selection = list(selection)
        self.total = len(self.selection)
        self.noun = noun
        self.completed = 0
        self._labels = {a.id: a.label for a in self.selection}

        self._live = Live(
            console=console,
            refresh_per_second=12,
            transient=False,
        )

    # ── Context manager ───────────────────────────────────────────────────────

    def __enter__(self) -> "RunNarrator":
        self._live.__enter__()
        self._live.update(self._render())
        return self

    def __exit__(self, *args) -> None:
        self._live.update(_idle_bar(self.completed, self.total, self.noun))
        self._live.__exit__(*args)
        self.console.print()

    # ── Public API ────────────────────────────────────────────────────────────

    def on_progress(self, event: ProgressEvent) -> None:
        """Print the finished action and advance the bar."""
        self.completed = event.index
        label = self._labels.get(event.action_id, event.action_id)
        self._live.console.print(_format_event(event, label))
        self._live.update(self._render())

    # ── Internal rendering ────────────────────────────────────────────────────

    def _render(self) -> Group:
        """
        Live area while actions run:

          ⠋  Disable Bing Search in Start Menu…

          [█████████░░░░░░░░░░░░░]  2/5 tweaks  ·  40%
        """
        if self.completed < self.total:
            current = self.selection[self.completed].label
            spinner = Spinner(
                "dots",
                text=Text(f"  {current}…", style=COLOR_DIM),
                style="cyan",
            )
            head = Padding(spinner, pad=(0, 0, 0, 4))
        else:
            head = Text("")

        progress = Padding(
            render_progress(self.completed, self.total, self.noun),
            pad=(1, 0, 0, 0),
        )
        return Group(head, progress)


# ── Module-level helpers ──────────────────────────────────────────────────────

def _idle_bar(completed: int, total: int, noun: str) -> Padding:
    return Padding(render_progress(completed, total, noun), pad=(1, 0, 0, 0))


def _format_event(event: ProgressEvent, label: str) -> Text:
    """
    One-line finished action:
      ✅  Show File Extensions
      ❌  Git                                 winget exited with code 1
    """
    icon = STATUS_ICONS.get(event.status, "?")
    style = STATUS_STYLES.get(event.status)

    line = Text()
    line.append(f"  {icon}  ", style=str(style))
    line.append(label.ljust(38), style=str(style) if event.reason else COLOR_TEXT)
    if event.reason:
        line.append(f"  {event.reason}", style=COLOR_DIM)
    return line
