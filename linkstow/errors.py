from pathlib import Path
from typing import Union


Cause = Union[BaseException, str]


def _describe(cause: Cause) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


class StowError(Exception):
    """Base user-facing stow error."""


class MissingPackagesError(StowError):
    def __init__(self) -> None:
        super().__init__("at least one package is required")


class MissingStowDirError(StowError):
    def __init__(self) -> None:
        super().__init__("dir is required")


class StowPathError(StowError):
    """An error tied to a filesystem path.

    ``str()`` renders as ``"<path>: <cause>"``; callers that need the path
    read :attr:`path` directly.
    """

    def __init__(self, path: Path, cause: Cause) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {_describe(cause)}")


class InvalidStowDirError(StowPathError):
    pass


class InvalidPackageError(StowPathError):
    pass


class LinkOperationError(StowPathError):
    @property
    def target(self) -> Path:
        return self.path
