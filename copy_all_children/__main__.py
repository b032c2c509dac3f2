#!/usr/bin/env python3
"""
Copy All Children - CLI Entry Point
===================================

Usage:
    python -m copy_all_children /path/to/origin /path/to/target
    python -m copy_all_children build/out dist --ignore-hidden --delete-origin
    python -m copy_all_children build/out dist --dry-run
"""

import argparse
import sys
from pathlib import Path

from .copier import copy_all_children, validate_origin, check_target
from .errors import CopyAllChildrenError
from .utils import console, print_header, print_error, print_warning, print_success


def cmd_dry_run(args) -> int:
    """Show what a copy would do without touching the filesystem."""
    children = validate_origin(args.origin, ignore_hidden_files=args.ignore_hidden)
    if not check_target(args.origin, args.target):
        console.print(f"  [WOULD CREATE] {args.target}")

    for child in children:
        console.print(f"  [WOULD COPY] {child.name} -> {args.target / child.name}")

    if args.delete_origin:
        console.print(f"  [WOULD DELETE] {args.origin}")

    print_warning("This was a DRY-RUN. Nothing was copied.")
    console.print("       Run without --dry-run to apply changes.")
    return 0


def cmd_copy(args) -> int:
    copy_all_children(
        args.origin,
        args.target,
        delete_origin_when_done=args.delete_origin,
        ignore_hidden_files=args.ignore_hidden,
    )
    print_success(f"Copied the contents of {args.origin} into {args.target}")
    if args.delete_origin:
        console.print(f"Deleted origin: {args.origin}")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="copy-all-children",
        description="Copy all files and subdirectories of ORIGIN into TARGET",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("origin", type=Path, help="Directory whose children are copied")
    parser.add_argument("target", type=Path, help="Directory to copy into (created if missing)")
    parser.add_argument("--delete-origin", action="store_true",
                        help="Delete ORIGIN after everything was copied")
    parser.add_argument("--ignore-hidden", action="store_true",
                        help="Skip entries whose name starts with a dot")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show what would be copied without modifying files")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    mode = "DRY-RUN" if args.dry_run else "COPY"
    print_header(f"Copy All Children [{mode}]", f"{args.origin} -> {args.target}")

    try:
        if args.dry_run:
            return cmd_dry_run(args)
        return cmd_copy(args)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except CopyAllChildrenError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
