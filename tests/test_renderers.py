from pathlib import Path

from rich.console import Console

from linkstow.models import Conflict, ConflictReason, Operation, PlanResult
from linkstow.tui import StowConsoleUI
from linkstow.tui.renderers import conflicts_style


def _conflict(reason: ConflictReason, name: str = "alpha.txt") -> Conflict:
    return Conflict(target=Path("/target") / name, reason=reason)


def test_conflicts_style_uses_most_severe_reason() -> None:
    plan = PlanResult(
        conflicts=(
            _conflict(ConflictReason.DUPLICATE_TARGET, "a"),
            _conflict(ConflictReason.SYMLINK_ELSEWHERE, "b"),
        )
    )

    assert conflicts_style(plan) == "yellow"


def test_conflicts_style_only_duplicates() -> None:
    plan = PlanResult(conflicts=(_conflict(ConflictReason.DUPLICATE_TARGET),))

    assert conflicts_style(plan) == "magenta"


def test_conflicts_style_target_exists_wins() -> None:
    plan = PlanResult(
        conflicts=(
            _conflict(ConflictReason.DUPLICATE_TARGET, "a"),
            _conflict(ConflictReason.TARGET_EXISTS, "b"),
        )
    )

    assert conflicts_style(plan) == "red"


def test_render_plan_lists_links_and_conflicts() -> None:
    console = Console(record=True, width=200)
    plan = PlanResult(
        operations=(Operation(Path("/stow/pkg/alpha.txt"), Path("/target/alpha.txt")),),
        conflicts=(_conflict(ConflictReason.TARGET_EXISTS, "bravo.txt"),),
    )

    StowConsoleUI(console).render_plan(
        plan, mode="plan", stow_dir=Path("/stow"), target=Path("/target")
    )

    text = console.export_text()
    assert "/target/alpha.txt" in text
    assert "/stow/pkg/alpha.txt" in text
    assert "target already exists" in text
    assert "apply <package>" in text
