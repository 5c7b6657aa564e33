from typing import Final


PROGRAM_NAME: Final[str] = "linkstow"

STOW_DIR_ENVVAR: Final[str] = "STOW_DIR"
DEFAULT_STOW_DIR: Final[str] = "."

EXIT_SUCCESS: Final[int] = 0
EXIT_CONFLICTS: Final[int] = 1
EXIT_ERROR: Final[int] = 2
