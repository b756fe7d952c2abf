"""
Report renderer.

  print_catalog     — table of available actions (id, label, recommended)
  print_run_summary — panel for one RunResult:
                        "8 of 9 succeeded, 1 failed" + one line per failure
"""

from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wintuner.actions.base import ActionRegistry
from wintuner.engine.executor import RunResult
from wintuner.ui.theme import (
    CATEGORY_TITLES,
    COLOR_BRAND,
    COLOR_DIM,
    COLOR_TEXT,
    ICON_RECOMMENDED,
    STATUS_ICONS,
    STATUS_STYLES,
)


def print_catalog(registry: ActionRegistry, console: Console, category: str = "tweak") -> None:
    """Print every action in `registry` as a table, in catalog order."""
    table = Table(
        title=CATEGORY_TITLES.get(category, category),
        title_justify="left",
        title_style=f"bold {COLOR_TEXT}",
        border_style=COLOR_DIM,
        show_lines=False,
    )
    table.add_column("ID", style="command", no_wrap=True)
    table.add_column("Name", style="text")
    table.add_column("", justify="center", width=3)
    table.add_column("What it does", style="dim")

    for action in registry:
        mark = ICON_RECOMMENDED if action.recommended else ""
        table.add_row(action.id, action.label, mark, action.description)

    console.print(table)
    console.print()


def print_run_summary(
    result: RunResult,
    console: Console,
    title: str = "Run complete",
    labels: Mapping[str, str] | None = None,
) -> None:
    """
    Print a Panel summarising one run.

    Empty runs and a missing WinGet each get their own wording so they
    are never mistaken for success.
    """
    labels = labels or {}
    body = Text()

    if result.is_empty:
        body.append("\n  Nothing selected. No changes were made.\n", style=COLOR_DIM)
        border = "dim"
    elif result.tool_unavailable:
        body.append(f"\n  {STATUS_ICONS['tool_unavailable']}  ", style=str(STATUS_STYLES["tool_unavailable"]))
        body.append(result.summary(), style=str(STATUS_STYLES["tool_unavailable"]))
        body.append("\n  No packages were installed. Install App Installer from the Microsoft Store.\n",
                    style=COLOR_DIM)
        border = "yellow"
    else:
        style = "bold bright_green" if result.ok else f"bold {COLOR_TEXT}"
        body.append(f"\n  {result.summary()}\n", style=style)
        for failure in result.failures:
            name = labels.get(failure.action_id, failure.action_id)
            body.append(f"\n  {STATUS_ICONS['failed']}  ", style=str(STATUS_STYLES["failed"]))
            body.append(name, style=f"bold {COLOR_TEXT}")
            body.append(f"  ·  {failure.reason}", style=COLOR_DIM)
        if result.failures:
            body.append("\n")
        border = "bright_green" if result.ok else "yellow"

    console.print(
        Panel(body, title=f"[bold]{title}[/bold]", title_align="left", border_style=border)
    )
    console.print()


def print_plan(console: Console, labels: list[str], heading: str) -> None:
    """Bullet list of what a run would do (used by --dry-run)."""
    console.print(f"  [bold]{escape(heading)}[/bold]")
    for label in labels:
        console.print(f"  [dim]•[/dim] {escape(label)}")
    console.print()


def section_title(text: str) -> Text:
    t = Text()
    t.append(f"  {text}", style=f"bold {COLOR_BRAND}")
    return t
