"""
WinTuner — entry point and orchestrator.

CLI flags, selection building, confirmation, session dispatch, output.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wintuner import __version__
from wintuner.actions.apps import build_app_registry
from wintuner.actions.base import Action, ActionRegistry
from wintuner.actions.tweaks import build_tweak_registry
from wintuner.config import load_config
from wintuner.engine.executor import RunResult
from wintuner.errors import UnknownIdError, WintunerError
from wintuner.ui.theme import WINTUNER_THEME


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(theme=WINTUNER_THEME)

logger = logging.getLogger("wintuner")


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="wintuner", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="wintuner")
# Catalog
@click.option("--list", "list_only", is_flag=True, default=False,
              help="List every available tweak and app, then exit.")
# Selection
@click.option("--recommended", is_flag=True, default=False,
              help="Select the recommended tweaks.")
@click.option("--all-tweaks", is_flag=True, default=False, help="Select every tweak.")
@click.option("--tweak", "tweak_ids", metavar="ID", multiple=True,
              help="Select a tweak by id (repeatable).")
@click.option("--app", "app_ids", metavar="ID", multiple=True,
              help="Select an app by WinGet id (repeatable).")
# Run modes
@click.option("--dry-run", is_flag=True, default=False,
              help="Show what would run without changing anything.")
@click.option("--yes", "-y", is_flag=True, default=False,
              help="Skip the confirmation prompt.")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Print run results as JSON.")
# Advanced
@click.option("--remove-edge", is_flag=True, default=False,
              help="Uninstall Microsoft Edge (requires administrator).")
# Exit code contract
@click.option("--fail-on-error", is_flag=True, default=False,
              help="Exit with code 2 if any action failed (useful in scripts).")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Config file (default ~/.config/wintuner/config.toml).")
def cli(
    list_only: bool,
    recommended: bool,
    all_tweaks: bool,
    tweak_ids: tuple[str, ...],
    app_ids: tuple[str, ...],
    dry_run: bool,
    yes: bool,
    as_json: bool,
    remove_edge: bool,
    fail_on_error: bool,
    verbose: bool,
    config_path: Optional[Path],
) -> None:
    """Windows 11 Optimisation Utility.

    Apply privacy and usability tweaks and install essential apps with
    WinGet. Every action runs once, in order; one failure never stops
    the rest.

    \b
    Examples:
      wintuner --recommended
      wintuner --tweak show_file_extensions --app Git.Git
      wintuner --list
    """
    _setup_logging(verbose)
    config = load_config(config_path)

    tweaks = build_tweak_registry()
    apps = build_app_registry(install_timeout=config["install_timeout"])

    if not as_json:
        from wintuner.ui.header import print_header
        print_header(console)

    # ── Catalog ───────────────────────────────────────────────────────────────
    if list_only:
        from wintuner.ui.report import print_catalog
        print_catalog(tweaks, console, category="tweak")
        print_catalog(apps, console, category="app")
        return

    # ── Edge removal ──────────────────────────────────────────────────────────
    if remove_edge:
        _remove_edge(yes)
        return

    # ── Build selections ──────────────────────────────────────────────────────
    try:
        tweak_sel, app_sel = _build_selection(
            tweaks, apps,
            recommended=recommended,
            all_tweaks=all_tweaks,
            tweak_ids=tweak_ids,
            app_ids=app_ids,
            config=config,
        )
    except UnknownIdError as e:
        console.print(f"[failed]Error:[/failed] {escape(str(e))}")
        console.print("[dim]Run wintuner --list to see valid ids.[/dim]")
        raise SystemExit(1)

    if not tweak_sel and not app_sel:
        if as_json:
            _output_json(RunResult(total=0), RunResult(total=0))
        else:
            console.print()
            console.print("  [dim]Nothing selected. Use --recommended, --tweak or --app "
                          "(see --list).[/dim]")
            console.print()
        return

    # ── Confirmation ──────────────────────────────────────────────────────────
    # JSON mode has no interactive prompt, so consent must come from --yes
    if as_json and not yes and not dry_run:
        click.echo("Error: --json applies changes without prompting; add --yes to confirm.",
                   err=True)
        raise SystemExit(1)

    if not yes and not dry_run:
        console.print()
        console.print(
            f"  [dim]Ready to apply [bold text]{len(tweak_sel)}[/bold text] tweak(s) and "
            f"install [bold text]{len(app_sel)}[/bold text] app(s).[/dim]"
        )
        console.print()
        console.print(
            "  [dim]Press [bold text]↵ \\[ENTER][/bold text] to begin  "
            "·  [bold text]Ctrl-C[/bold text] to cancel[/dim]"
        )
        try:
            input()
        except (KeyboardInterrupt, EOFError):
            console.print("\n  [dim]Cancelled.[/dim]\n")
            return

    # ── Run ───────────────────────────────────────────────────────────────────
    if as_json:
        tweak_result, app_result = _run_quiet(tweak_sel, app_sel, dry_run)
        if tweak_result is None or app_result is None:
            return
        _output_json(tweak_result, app_result)
    else:
        from wintuner.engine.runner import run_install_session, run_tweak_session

        tweak_result = run_tweak_session(tweak_sel, console, dry_run=dry_run) if tweak_sel else None
        app_result = run_install_session(app_sel, console, dry_run=dry_run) if app_sel else None

    # ── Exit code contract ────────────────────────────────────────────────────
    if fail_on_error:
        failed = sum(r.failed_count for r in (tweak_result, app_result) if r is not None)
        if failed:
            raise SystemExit(2)


# ── Logging ───────────────────────────────────────────────────────────────────

def _setup_logging(verbose: bool) -> None:
    """Route wintuner's loggers through rich, on stderr, above the UI."""
    handler = RichHandler(
        console=Console(stderr=True, theme=WINTUNER_THEME),
        show_path=False,
        markup=False,
    )
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


# ── Selection ─────────────────────────────────────────────────────────────────

def _build_selection(
    tweaks: ActionRegistry,
    apps: ActionRegistry,
    recommended: bool,
    all_tweaks: bool,
    tweak_ids: tuple[str, ...],
    app_ids: tuple[str, ...],
    config: dict,
) -> tuple[list[Action], list[Action]]:
    """
    Resolve CLI flags (or config defaults when no flag selects anything)
    into ordered tweak and app selections.

    Raises UnknownIdError before anything runs if any id is not registered.
    """
    explicit = recommended or all_tweaks or bool(tweak_ids) or bool(app_ids)
    if not explicit:
        return tweaks.by_ids(config["tweaks"]), apps.by_ids(config["apps"])

    wanted = [a.id for a in tweaks.select_recommended()] if recommended else []
    tweak_sel = tweaks.by_ids(wanted + list(tweak_ids))
    # --tweak ids are still resolved above so a typo fails even with --all-tweaks
    if all_tweaks:
        tweak_sel = tweaks.all()

    return tweak_sel, apps.by_ids(app_ids)


def _run_quiet(
    tweak_sel: list[Action], app_sel: list[Action], dry_run: bool,
) -> tuple[Optional[RunResult], Optional[RunResult]]:
    """Run both batches with no live UI (JSON mode)."""
    from wintuner.engine.executor import run_actions
    from wintuner.engine.installer import run_installs

    if dry_run:
        import json
        plan = {"tweaks": [a.id for a in tweak_sel], "apps": [a.id for a in app_sel]}
        click.echo(json.dumps({"dry_run": True, "plan": plan}, indent=2))
        return None, None

    return run_actions(tweak_sel), run_installs(app_sel)


# ── Edge removal ──────────────────────────────────────────────────────────────

def _remove_edge(yes: bool) -> None:
    from wintuner.actions.tweaks import is_admin, remove_edge

    console.print()
    if not is_admin():
        console.print("  [failed]Removing Microsoft Edge requires administrator privileges.[/failed]")
        console.print("  [dim]Re-run wintuner from an elevated terminal.[/dim]\n")
        raise SystemExit(1)

    console.print("  [warning]This will remove Microsoft Edge.[/warning]")
    console.print("  [dim]Windows Update may reinstall it.[/dim]")
    console.print()
    if not yes and not click.confirm("  Continue?", default=False):
        console.print("  [dim]Cancelled.[/dim]\n")
        return

    try:
        installer = remove_edge(admin=True)
    except WintunerError as e:
        console.print(f"  [failed]Failed to remove Edge:[/failed] {escape(str(e))}\n")
        raise SystemExit(1)

    console.print(f"  [success]Removing Microsoft Edge…[/success]  [dim]{escape(str(installer))}[/dim]\n")


# ── JSON output ───────────────────────────────────────────────────────────────

def _output_json(tweak_result: RunResult, app_result: RunResult) -> None:
    """Serialize both RunResults plus system info to JSON on stdout."""
    import json
    from datetime import datetime, timezone

    from wintuner.system_info import get_system_info

    payload = {
        "schema_version": 1,
        "wintuner_version": __version__,
        "run_time": datetime.now(timezone.utc).isoformat(),
        "system": get_system_info(),
        "tweaks": _result_dict(tweak_result),
        "apps": _result_dict(app_result),
    }
    click.echo(json.dumps(payload, indent=2))


def _result_dict(result: RunResult) -> dict:
    import dataclasses

    return {
        "total": result.total,
        "succeeded": result.succeeded_count,
        "failed": result.failed_count,
        "tool_unavailable": result.tool_unavailable,
        "summary": result.summary(),
        "outcomes": [dataclasses.asdict(o) for o in result.outcomes],
    }


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
