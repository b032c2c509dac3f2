"""
Copy All Children
=================

Copy every file and subdirectory of one directory into another, optionally
skipping hidden entries and removing the origin afterward.
"""

__version__ = "1.0.0"

from .copier import copy_all_children, list_children
from .errors import (
    CopyAllChildrenError,
    OriginDoesNotExist,
    OriginIsNotADirectory,
    OriginIsEmpty,
    OriginAndTargetAreTheSame,
    TargetExistsButIsNotADirectory,
    CouldNotCreateDirectoryForTarget,
    FailedToDeleteExistingTargetItem,
    FailedToCopyItem,
    FailedToDeleteOrigin,
)
from .utils import is_hidden

__all__ = [
    "copy_all_children",
    "list_children",
    "is_hidden",
    "CopyAllChildrenError",
    "OriginDoesNotExist",
    "OriginIsNotADirectory",
    "OriginIsEmpty",
    "OriginAndTargetAreTheSame",
    "TargetExistsButIsNotADirectory",
    "CouldNotCreateDirectoryForTarget",
    "FailedToDeleteExistingTargetItem",
    "FailedToCopyItem",
    "FailedToDeleteOrigin",
]
