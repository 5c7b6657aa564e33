from enum import Enum

from linkstow.models import ConflictReason


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


CONFLICT_REASON_STYLE = {
    ConflictReason.TARGET_EXISTS: UIStyle.RED.value,
    ConflictReason.SYMLINK_ELSEWHERE: UIStyle.YELLOW.value,
    ConflictReason.DUPLICATE_TARGET: UIStyle.MAGENTA.value,
}
