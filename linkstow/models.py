from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable


class ConflictReason(str, Enum):
    TARGET_EXISTS = "target already exists"
    SYMLINK_ELSEWHERE = "symlink points elsewhere"
    DUPLICATE_TARGET = "duplicate target planned"


@dataclass(frozen=True)
class Operation:
    """Create a symbolic link at ``target`` pointing to ``source``."""

    source: Path
    target: Path


@dataclass(frozen=True)
class Conflict:
    target: Path
    reason: ConflictReason


@dataclass(frozen=True)
class PlanOptions:
    dir: Path
    target: Path
    packages: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls, dir: str | Path, target: str | Path, packages: Iterable[str]
    ) -> "PlanOptions":
        if isinstance(packages, str):
            raise TypeError("packages must be an iterable of names, not a single str")
        return cls(dir=Path(dir), target=Path(target), packages=tuple(packages))


@dataclass(frozen=True)
class ExecuteOptions:
    dry_run: bool = False
    relative: bool = False


@dataclass(frozen=True)
class PlanResult:
    operations: tuple[Operation, ...] = ()
    conflicts: tuple[Conflict, ...] = ()

    @classmethod
    def empty(cls) -> "PlanResult":
        return cls()

    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def is_empty(self) -> bool:
        return not self.operations and not self.conflicts

    def summary(self) -> dict[str, int]:
        by_reason = Counter(conflict.reason for conflict in self.conflicts)
        counts = {reason.value: by_reason.get(reason, 0) for reason in ConflictReason}
        counts["operations"] = len(self.operations)
        counts["conflicts"] = len(self.conflicts)
        return counts
