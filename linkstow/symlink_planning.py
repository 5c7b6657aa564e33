import logging
import stat
from enum import Enum
from pathlib import Path
from typing import Optional

from linkstow.errors import StowPathError
from linkstow.models import ConflictReason
from linkstow.utils import clean_abs_path, link_destination


logger = logging.getLogger(__name__)


class TargetState(str, Enum):
    ABSENT = "absent"
    LINKED = "linked"
    LINKED_ELSEWHERE = "linked_elsewhere"
    OCCUPIED = "occupied"


_CONFLICT_REASONS = {
    TargetState.LINKED_ELSEWHERE: ConflictReason.SYMLINK_ELSEWHERE,
    TargetState.OCCUPIED: ConflictReason.TARGET_EXISTS,
}


def symlink_matches(link: Path, source: Path) -> bool:
    """Return True if the raw value of ``link`` names ``source``.

    Relative link values are taken against the link's own directory. Both
    sides are cleaned lexically; no further symlinks are followed.
    """
    return link_destination(link) == clean_abs_path(source)


def classify_target(target: Path, source: Path) -> TargetState:
    try:
        info = target.lstat()
    except FileNotFoundError:
        return TargetState.ABSENT
    except OSError as exc:
        raise StowPathError(target, exc) from exc

    if not stat.S_ISLNK(info.st_mode):
        return TargetState.OCCUPIED
    try:
        matches = symlink_matches(target, source)
    except OSError as exc:
        raise StowPathError(target, exc) from exc
    logger.debug("existing link %s matches %s: %s", target, source, matches)
    return TargetState.LINKED if matches else TargetState.LINKED_ELSEWHERE


def conflict_reason_for(state: TargetState) -> Optional[ConflictReason]:
    return _CONFLICT_REASONS.get(state)
