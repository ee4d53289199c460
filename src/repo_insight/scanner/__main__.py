"""
Scan a codebase and print its structure.
  python -m repo_insight.scanner --root /path/to/project [--read] [--tree]
"""

import argparse
import json
import sys
from pathlib import Path

from ..logging_utils import configure_logging
from ..results import DirectoryScanError
from .scanner import scan_project
from .tree import render_tree


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Scan a project and print its structure")
    ap.add_argument("--root", "-r", default=".", type=Path, help="Project root directory")
    ap.add_argument("--read", action="store_true", help="Inline contents of files with an allowed extension")
    ap.add_argument("--tree", action="store_true", help="Print an ASCII tree instead of JSON")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        structure = scan_project(args.root, read_files=args.read)
    except DirectoryScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.tree:
        print(render_tree(structure))
    else:
        print(json.dumps(structure, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
