"""
Scans a project directory into a map of directory -> file records.
Skips node_modules, .git, .env and package-lock.json; can inline the
contents of files with a recognised extension.
"""

import logging
import os
from pathlib import Path
from typing import Iterable

from ..results import DirectoryScanError, FailureKind, Outcome

logger = logging.getLogger(__name__)

# Extensions whose contents may be read. "pdf" and "txt" have no leading
# dot, so they never match a real suffix; kept as configured.
ALLOWED_EXTENSIONS = (".js", ".py", ".tsx", ".json", "pdf", "txt")

# Never descended into or listed
EXCLUDED_DIRS = frozenset({"node_modules", ".env", ".git", "package-lock.json"})
# Never listed
EXCLUDED_FILES = frozenset({".env", ".git", "package-lock.json"})

FileRecord = dict[str, str]
DirectoryEntry = dict[str, FileRecord]
ProjectMap = dict[str, DirectoryEntry]


def is_allowed_extension(ext: str, allowed: Iterable[str] = ALLOWED_EXTENSIONS) -> bool:
    """An empty extension is never allowed."""
    return bool(ext) and ext in allowed


def _read_text(path: str | Path) -> str:
    # newline="" keeps the text byte-for-byte; bad bytes become U+FFFD
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def _file_record(path: str, read_files: bool, allowed: Iterable[str]) -> FileRecord:
    ext = os.path.splitext(path)[1]
    if not (read_files and is_allowed_extension(ext, allowed)):
        return {}
    try:
        return {"content": _read_text(path)}
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        return {"error": f"Error reading file: {e}"}


def _relative_key(root: str, directory: str) -> str:
    rel = os.path.relpath(directory, root)
    return "" if rel == os.curdir else Path(rel).as_posix()


def _walk(root: str, directory: str, read_files: bool, allowed: Iterable[str]) -> ProjectMap:
    """Return the map for directory and everything below it."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryScanError(directory, e.strerror or str(e)) from e

    files: DirectoryEntry = {}
    subtrees: ProjectMap = {}
    for entry in entries:
        # is_dir() follows links, so a symlinked node_modules is dropped too
        if entry.name in EXCLUDED_DIRS and entry.is_dir():
            continue
        if entry.is_dir(follow_symlinks=False):
            subtrees.update(_walk(root, entry.path, read_files, allowed))
        else:
            if entry.name in EXCLUDED_FILES:
                continue
            files[entry.name] = _file_record(entry.path, read_files, allowed)

    result: ProjectMap = {_relative_key(root, directory): files}
    result.update(subtrees)
    return result


def scan_project(
    directory: str | Path = ".",
    read_files: bool = False,
    *,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> ProjectMap:
    """
    Walk the project tree and return {relative_dir: {file_name: record}}.
    The root's own files are keyed under "". Raises DirectoryScanError if
    any directory cannot be listed; unreadable files only get an error record.
    """
    root = os.fspath(directory)
    if os.path.basename(os.path.normpath(root)) == "node_modules":
        return {}
    allowed = frozenset(allowed_extensions)
    structure = _walk(root, root, read_files, allowed)
    logger.debug("Scanned %s: %d directories", root, len(structure))
    return structure


def read_selected_file(
    file_path: str | Path,
    *,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> Outcome[str]:
    """
    Read a single file if its extension is allowed.
    Rejections and read errors come back as failures, never raised.
    """
    ext = os.path.splitext(os.fspath(file_path))[1]
    if not is_allowed_extension(ext, allowed_extensions):
        return Outcome.fail(FailureKind.EXTENSION_NOT_ALLOWED, f"File extension '{ext}' not allowed.")
    try:
        return Outcome.success(_read_text(file_path))
    except OSError as e:
        return Outcome.fail(FailureKind.FILE_READ, f"Error reading file: {e}")
