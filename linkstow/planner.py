import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path

from linkstow.errors import (
    InvalidPackageError,
    InvalidStowDirError,
    MissingPackagesError,
    MissingStowDirError,
    StowPathError,
)
from linkstow.models import (
    Conflict,
    ConflictReason,
    Operation,
    PlanOptions,
    PlanResult,
)
from linkstow.symlink_planning import TargetState, classify_target, conflict_reason_for
from linkstow.utils import clean_abs_path


logger = logging.getLogger(__name__)


@dataclass
class _PlanState:
    operations: list[Operation] = field(default_factory=list)
    conflicts: list[Conflict] = field(default_factory=list)
    seen_targets: set[Path] = field(default_factory=set)

    def result(self) -> PlanResult:
        return PlanResult(
            operations=tuple(self.operations), conflicts=tuple(self.conflicts)
        )


def default_target(dir: str | os.PathLike) -> Path:
    """Default target for a stow directory: the parent of its absolute path."""
    if not os.fspath(dir):
        raise MissingStowDirError()
    return clean_abs_path(dir).parent


class StowPlanner:
    def __init__(self, options: PlanOptions) -> None:
        self.options = options

    def build(self) -> PlanResult:
        if not self.options.packages:
            raise MissingPackagesError()

        stow_dir = clean_abs_path(self.options.dir)
        self._require_directory(stow_dir, InvalidStowDirError, "dir is not a directory")
        target_root = clean_abs_path(self.options.target)

        state = _PlanState()
        for package in sorted(set(self.options.packages)):
            package_root = self._package_root(stow_dir, package)
            self._require_directory(
                package_root, InvalidPackageError, "package is not a directory"
            )
            logger.debug("planning package %s into %s", package, target_root)
            self._walk(package_root, Path(), target_root, state)

        result = state.result()
        logger.debug(
            "plan ready: %d operation(s), %d conflict(s)",
            len(result.operations),
            len(result.conflicts),
        )
        return result

    @staticmethod
    def _package_root(stow_dir: Path, package: str) -> Path:
        package_root = clean_abs_path(os.path.join(stow_dir, package))
        if os.path.isabs(package) or stow_dir not in package_root.parents:
            raise InvalidPackageError(package_root, "package is not under dir")
        return package_root

    @staticmethod
    def _require_directory(
        path: Path, error: type[StowPathError], not_dir_message: str
    ) -> None:
        try:
            info = path.stat()
        except OSError as exc:
            raise error(path, exc) from exc
        if not stat.S_ISDIR(info.st_mode):
            raise error(path, not_dir_message)

    def _walk(
        self, directory: Path, relative: Path, target_root: Path, state: _PlanState
    ) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise StowPathError(directory, exc) from exc

        for entry in entries:
            source = directory / entry.name
            entry_relative = relative / entry.name
            if not entry.is_symlink() and entry.is_dir(follow_symlinks=False):
                self._walk(source, entry_relative, target_root, state)
                continue
            self._plan_leaf(source, target_root / entry_relative, state)

    @staticmethod
    def _plan_leaf(source: Path, target: Path, state: _PlanState) -> None:
        if target in state.seen_targets:
            logger.debug("duplicate target %s from %s", target, source)
            state.conflicts.append(Conflict(target, ConflictReason.DUPLICATE_TARGET))
            return
        state.seen_targets.add(target)

        target_state = classify_target(target, source)
        if target_state == TargetState.ABSENT:
            state.operations.append(Operation(source=source, target=target))
            return
        if target_state == TargetState.LINKED:
            logger.debug("already linked: %s", target)
            return
        reason = conflict_reason_for(target_state)
        logger.debug("conflict at %s: %s", target, reason.value)
        state.conflicts.append(Conflict(target, reason))


def build_plan(options: PlanOptions) -> PlanResult:
    return StowPlanner(options).build()
