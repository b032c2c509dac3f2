"""
Copy the children of one directory into another.

The whole operation is a single call: validate the origin, prepare the
target, copy every direct child of the origin into the target (replacing
same-named entries) and optionally remove the origin afterward.
"""

import os
import shutil
from pathlib import Path

from .errors import (
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


def list_children(origin: Path, ignore_hidden_files: bool = False) -> list[Path]:
    """
    List the direct children of a directory, sorted by name.

    Args:
        origin: Directory to list.
        ignore_hidden_files: If True, leave out entries starting with a dot.

    Returns:
        Paths of the children.

    Raises:
        OSError: If the directory cannot be read.
    """
    children = [
        entry for entry in Path(origin).iterdir()
        if not (ignore_hidden_files and is_hidden(entry.name))
    ]
    return sorted(children, key=lambda p: p.name)


def _remove_item(path: Path) -> None:
    """Remove a file, symlink or whole directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        os.unlink(path)


def _copy_item(src: Path, dst: Path) -> None:
    """Copy a file or a whole directory tree. Symlinks are copied as links."""
    if src.is_dir() and not src.is_symlink():
        shutil.copytree(src, dst, symlinks=True)
    else:
        shutil.copy2(src, dst, follow_symlinks=False)


def validate_origin(origin: Path, ignore_hidden_files: bool = False) -> list[Path]:
    """
    Check that origin is a non-empty directory and return its children.

    Raises:
        OriginDoesNotExist, OriginIsNotADirectory, OriginIsEmpty
    """
    # False on any OSError, EACCES included
    if not os.path.exists(origin):
        raise OriginDoesNotExist(f"Origin does not exist: {origin}", origin)
    if not os.path.isdir(origin):
        raise OriginIsNotADirectory(f"Origin is not a directory: {origin}", origin)

    try:
        children = list_children(origin, ignore_hidden_files=ignore_hidden_files)
    except OSError as e:
        # An unreadable listing counts as empty
        raise OriginIsEmpty(f"Could not list origin {origin}: {e}", origin) from e

    if not children:
        raise OriginIsEmpty(f"Origin has nothing to copy: {origin}", origin)
    return children


def check_target(origin: Path, target: Path) -> bool:
    """
    Check that target can receive the children of origin.

    Returns:
        True if target already exists as a directory, False if it is missing.

    Raises:
        OriginAndTargetAreTheSame, TargetExistsButIsNotADirectory
    """
    # Plain path comparison, symlinks are not resolved
    if origin == target:
        raise OriginAndTargetAreTheSame(f"Origin and target are the same: {origin}", origin)

    # An unsearchable target falls through to mkdir and fails there
    if os.path.exists(target):
        if not os.path.isdir(target):
            raise TargetExistsButIsNotADirectory(
                f"Target exists but is not a directory: {target}", target
            )
        return True
    return False


def copy_all_children(
    origin: str | os.PathLike,
    target: str | os.PathLike,
    delete_origin_when_done: bool = False,
    ignore_hidden_files: bool = False
) -> None:
    """
    Copy all files and subdirectories of origin into target.

    The target directory is created (with parents) if needed. Entries in
    target with the same name as an origin child are replaced, anything else
    in target is left alone. Subdirectories are copied as whole trees.

    Copying stops at the first failure. Children copied before the failure
    stay in target.

    Args:
        origin: Directory whose children are copied. Must not be empty.
        target: Directory to copy into.
        delete_origin_when_done: If True, remove origin after every child was copied.
        ignore_hidden_files: If True, hidden children are neither counted nor copied.

    Raises:
        CopyAllChildrenError: One of its subclasses, depending on what failed.
    """
    origin = Path(origin)
    target = Path(target)

    children = validate_origin(origin, ignore_hidden_files=ignore_hidden_files)

    if not check_target(origin, target):
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CouldNotCreateDirectoryForTarget(
                f"Could not create target directory {target}: {e}", target
            ) from e

    for child in children:
        target_item = target / child.name

        # lexists so a dangling symlink in target is replaced too
        if os.path.lexists(target_item):
            try:
                _remove_item(target_item)
            except OSError as e:
                raise FailedToDeleteExistingTargetItem(
                    f"Could not delete existing {target_item}: {e}", target_item
                ) from e

        try:
            _copy_item(child, target_item)
        except OSError as e:
            raise FailedToCopyItem(f"Could not copy {child} to {target_item}: {e}", child) from e

    if delete_origin_when_done:
        try:
            _remove_item(origin)
        except OSError as e:
            raise FailedToDeleteOrigin(f"Could not delete origin {origin}: {e}", origin) from e
