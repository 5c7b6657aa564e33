from linkstow.errors import (
    InvalidPackageError,
    InvalidStowDirError,
    LinkOperationError,
    MissingPackagesError,
    MissingStowDirError,
    StowError,
    StowPathError,
)
from linkstow.executor import StowExecutor, execute
from linkstow.models import (
    Conflict,
    ConflictReason,
    ExecuteOptions,
    Operation,
    PlanOptions,
    PlanResult,
)
from linkstow.planner import StowPlanner, build_plan, default_target

__all__ = [
    "Conflict",
    "ConflictReason",
    "ExecuteOptions",
    "InvalidPackageError",
    "InvalidStowDirError",
    "LinkOperationError",
    "MissingPackagesError",
    "MissingStowDirError",
    "Operation",
    "PlanOptions",
    "PlanResult",
    "StowError",
    "StowExecutor",
    "StowPathError",
    "StowPlanner",
    "build_plan",
    "default_target",
    "execute",
]
