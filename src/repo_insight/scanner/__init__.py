"""
Project scanner.
Walks a codebase into a map of directories and file records, and reads
single files under the same extension rule.
"""

from .scanner import ALLOWED_EXTENSIONS, read_selected_file, scan_project
from .tree import render_tree

__all__ = ["ALLOWED_EXTENSIONS", "scan_project", "read_selected_file", "render_tree"]
