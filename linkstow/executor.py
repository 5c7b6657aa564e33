import logging
import os
from typing import Optional

from linkstow.errors import LinkOperationError
from linkstow.models import ExecuteOptions, Operation, PlanResult
from linkstow.utils import relative_link_value


logger = logging.getLogger(__name__)


class StowExecutor:
    """Applies the operations of a plan, in order.

    Conflicts are informational and never touched. The first failure aborts
    the run; links created before it are left in place.
    """

    def __init__(self, options: Optional[ExecuteOptions] = None) -> None:
        self.options = options or ExecuteOptions()

    def execute(self, plan: PlanResult) -> int:
        if self.options.dry_run:
            logger.debug(
                "dry run: skipping %d planned link(s)", len(plan.operations)
            )
            return 0

        applied = 0
        for operation in plan.operations:
            self._apply(operation)
            applied += 1
        return applied

    def _apply(self, operation: Operation) -> None:
        target = operation.target
        parent = target.parent
        if not parent.is_dir():
            logger.debug("creating directory %s", parent)
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LinkOperationError(target, exc) from exc

        link_value = (
            relative_link_value(operation.source, target)
            if self.options.relative
            else os.fspath(operation.source)
        )
        try:
            os.symlink(link_value, target)
        except OSError as exc:
            raise LinkOperationError(target, exc) from exc
        logger.info("LINK %s -> %s", target, link_value)


def execute(plan: PlanResult, options: Optional[ExecuteOptions] = None) -> int:
    return StowExecutor(options).execute(plan)
