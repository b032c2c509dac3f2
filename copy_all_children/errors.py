"""
Errors raised by copy_all_children.

Every failure of a copy is reported as one of the subclasses below. They all
derive from CopyAllChildrenError so callers can catch the whole family.
"""

from pathlib import Path


class CopyAllChildrenError(Exception):
    """Base class for everything copy_all_children can raise."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class OriginDoesNotExist(CopyAllChildrenError):
    """Nothing exists at the origin path."""


class OriginIsNotADirectory(CopyAllChildrenError):
    """The origin path exists but is not a directory."""


class OriginIsEmpty(CopyAllChildrenError):
    """
    The origin has no children to copy.

    Also raised when the origin listing could not be read; the OSError is
    kept as __cause__.
    """


class OriginAndTargetAreTheSame(CopyAllChildrenError):
    """Origin and target are the same path."""


class TargetExistsButIsNotADirectory(CopyAllChildrenError):
    """The target path points to a file, not a directory."""


class CouldNotCreateDirectoryForTarget(CopyAllChildrenError):
    pass


class FailedToDeleteExistingTargetItem(CopyAllChildrenError):
    pass


class FailedToCopyItem(CopyAllChildrenError):
    pass


class FailedToDeleteOrigin(CopyAllChildrenError):
    """Removing the origin failed. Everything copied so far stays in target."""
