from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from linkstow.constants import (
    DEFAULT_STOW_DIR,
    EXIT_CONFLICTS,
    EXIT_ERROR,
    EXIT_SUCCESS,
    STOW_DIR_ENVVAR,
)
from linkstow.errors import MissingStowDirError, StowError
from linkstow.executor import StowExecutor
from linkstow.log import configure_logging
from linkstow.models import ExecuteOptions, PlanOptions, PlanResult
from linkstow.planner import StowPlanner, default_target
from linkstow.tui import StowConsoleUI


class StowCommandError(click.ClickException):
    exit_code = EXIT_ERROR


def _stow_arguments(func: Callable) -> Callable:
    func = click.argument("packages", nargs=-1)(func)
    func = click.option(
        "-t",
        "--target",
        type=click.Path(),
        default=None,
        help="Target directory (default: parent of the stow directory).",
    )(func)
    func = click.option(
        "-d",
        "--dir",
        "stow_dir",
        type=click.Path(),
        default=DEFAULT_STOW_DIR,
        envvar=STOW_DIR_ENVVAR,
        show_default=True,
        help=f"Stow directory holding the packages (env: {STOW_DIR_ENVVAR}).",
    )(func)
    return func


def _resolve_paths(stow_dir: str, target: Optional[str]) -> tuple[Path, Path]:
    try:
        if not stow_dir:
            raise MissingStowDirError()
        if not target:
            return Path(stow_dir), default_target(stow_dir)
    except StowError as exc:
        raise StowCommandError(str(exc))
    return Path(stow_dir), Path(target)


def _build(stow_dir: Path, target: Path, packages: tuple[str, ...]) -> PlanResult:
    options = PlanOptions.create(dir=stow_dir, target=target, packages=packages)
    try:
        return StowPlanner(options).build()
    except StowError as exc:
        raise StowCommandError(str(exc))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", count=True, help="Log more detail (repeatable).")
def cli(verbose: int) -> None:
    """Symlink farm manager: link package trees into a target directory."""
    configure_logging(verbose)


@cli.command(help="Build and print the link plan without changing anything.")
@_stow_arguments
def plan(
    stow_dir: str,
    target: Optional[str],
    packages: tuple[str, ...],
) -> None:
    ui = StowConsoleUI(Console())
    stow_path, target_path = _resolve_paths(stow_dir, target)
    plan_result = _build(stow_path, target_path, packages)

    ui.render_plan(plan_result, mode="plan", stow_dir=stow_path, target=target_path)

    if plan_result.has_conflicts():
        raise click.exceptions.Exit(EXIT_CONFLICTS)


@cli.command(help="Link package contents into the target directory.")
@_stow_arguments
@click.option(
    "-n",
    "--no",
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Show what would be linked without changing anything.",
)
@click.option(
    "--relative",
    is_flag=True,
    help="Write links relative to their own directory.",
)
def apply(
    stow_dir: str,
    target: Optional[str],
    packages: tuple[str, ...],
    dry_run: bool,
    relative: bool,
) -> None:
    ui = StowConsoleUI(Console())
    stow_path, target_path = _resolve_paths(stow_dir, target)
    plan_result = _build(stow_path, target_path, packages)

    mode = "apply:dry-run" if dry_run else "apply"
    ui.render_plan(plan_result, mode=mode, stow_dir=stow_path, target=target_path)

    executor = StowExecutor(ExecuteOptions(dry_run=dry_run, relative=relative))
    try:
        applied = executor.execute(plan_result)
    except StowError as exc:
        raise StowCommandError(str(exc))
    ui.render_apply_result(
        applied=applied, skipped=len(plan_result.conflicts), dry_run=dry_run
    )

    if plan_result.has_conflicts():
        raise click.exceptions.Exit(EXIT_CONFLICTS)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return result if isinstance(result, int) else EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
