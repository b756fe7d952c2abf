"""
Progress bar for an engine run.

RunNarrator keeps the count of finished actions and calls render_progress
after each ProgressEvent. The fill is completed/total, the same value as
ProgressEvent.fraction, so the bar never stalls short of 100%.

    [██████████████░░░░░░░░]  3/5 tweaks  ·  60%
"""

from rich.text import Text

from wintuner.ui.theme import COLOR_DIM, PROGRESS_BAR_COLOR, PROGRESS_COMPLETE_COLOR


BAR_WIDTH = 22


def render_progress(completed: int, total: int, noun: str = "actions") -> Text:
    """Bar plus "completed/total noun" for `completed` finished actions."""
    if not total:
        return Text(f"  No {noun} to run", style=COLOR_DIM)

    filled = round(BAR_WIDTH * completed / total)
    color = PROGRESS_COMPLETE_COLOR if completed >= total else PROGRESS_BAR_COLOR

    return Text.assemble(
        ("  [", COLOR_DIM),
        ("█" * filled, color),
        ("░" * (BAR_WIDTH - filled), COLOR_DIM),
        ("]  ", COLOR_DIM),
        (f"{completed}/{total} {noun}", f"bold {color}"),
        (f"  ·  {completed * 100 // total}%", COLOR_DIM),
    )
