from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from linkstow.constants import PROGRAM_NAME
from linkstow.models import ConflictReason, PlanResult
from linkstow.tui.enums import CONFLICT_REASON_STYLE, UIStyle
from linkstow.tui.tables import ApplyTable, PlanTable


# Most severe first; the conflicts panel border takes the first present.
_REASON_SEVERITY = (
    ConflictReason.TARGET_EXISTS,
    ConflictReason.SYMLINK_ELSEWHERE,
    ConflictReason.DUPLICATE_TARGET,
)


def _panel(body, title: str, style: str, subtitle: Optional[str] = None) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


def conflicts_style(plan: PlanResult) -> str:
    present = {conflict.reason for conflict in plan.conflicts}
    for reason in _REASON_SEVERITY:
        if reason in present:
            return CONFLICT_REASON_STYLE[reason]
    return UIStyle.DIM.value


class StowConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(
        self, plan: PlanResult, mode: str, stow_dir: Path, target: Path
    ) -> None:
        self.console.print(
            _panel(
                PlanTable.summary_block(plan, mode=mode, stow_dir=stow_dir, target=target),
                title="plan overview",
                style=UIStyle.BLUE.value,
            )
        )

        if plan.operations:
            self.console.print(
                _panel(
                    PlanTable.operations_table(plan.operations),
                    title="links",
                    style=UIStyle.CYAN.value,
                )
            )
        if plan.conflicts:
            self.console.print(
                _panel(
                    PlanTable.conflicts_table(plan.conflicts),
                    title="conflicts",
                    style=conflicts_style(plan),
                    subtitle="left untouched",
                )
            )
        if plan.is_empty():
            self.console.print(
                _panel(
                    "Nothing to do, all packages are linked.",
                    title="links",
                    style=UIStyle.DIM.value,
                )
            )

        if mode == "plan" and plan.operations:
            self.console.print(
                _panel(
                    "Review the links above, then run apply.\n"
                    f"- {PROGRAM_NAME} apply <package>...",
                    title="next",
                    style=UIStyle.DIM.value,
                )
            )

    def render_apply_result(self, applied: int, skipped: int, dry_run: bool) -> None:
        self.console.print(
            ApplyTable.stats_panel(applied=applied, skipped=skipped, dry_run=dry_run)
        )
