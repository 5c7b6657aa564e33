from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table

from linkstow.models import Conflict, ConflictReason, Operation, PlanResult
from linkstow.tui.enums import CONFLICT_REASON_STYLE, UIStyle
from linkstow.utils import clean_abs_path, compact_home_path


class PlanTable:
    @staticmethod
    def summary_block(plan: PlanResult, mode: str, stow_dir: Path, target: Path):
        counts = plan.summary()
        chips = [
            f"{reason.value}={counts[reason.value]}"
            for reason in ConflictReason
            if counts[reason.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Stow dir", compact_home_path(clean_abs_path(stow_dir)))
        table.add_row("Target", compact_home_path(clean_abs_path(target)))
        table.add_row("Links", str(counts["operations"]))
        table.add_row("Conflicts", "  ".join(chips))
        return table

    @staticmethod
    def operations_table(operations: tuple[Operation, ...]) -> Table:
        table = Table(
            Column(header="Status", width=8),
            Column(header="Target", overflow="fold"),
            Column(header="Source", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        style = UIStyle.GREEN.value
        for operation in operations:
            table.add_row(
                f"[{style}]link[/{style}]",
                compact_home_path(operation.target),
                compact_home_path(operation.source),
            )
        return table

    @staticmethod
    def conflicts_table(conflicts: tuple[Conflict, ...]) -> Table:
        table = Table(
            Column(header="Target", overflow="fold"),
            Column(header="Reason", width=26, no_wrap=True),
            expand=True,
            header_style="bold",
        )
        for conflict in conflicts:
            style = CONFLICT_REASON_STYLE.get(conflict.reason, UIStyle.WHITE.value)
            table.add_row(
                compact_home_path(conflict.target),
                f"[{style}]{conflict.reason.value}[/{style}]",
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, skipped: int, dry_run: bool) -> Panel:
        stats: dict[str, str] = {
            "linked": str(applied),
            "conflicts": str(skipped),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="apply (dry run)" if dry_run else "apply",
            border_style=UIStyle.GREEN.value if skipped == 0 else UIStyle.YELLOW.value,
        )
