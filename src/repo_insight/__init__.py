"""
repo-insight: scan a codebase and ask a chat model about it.
"""

from .analyzer import analyze_content, analyze_project, create_client
from .results import DirectoryScanError, Failure, FailureKind, MissingCredentialError, Outcome, RepoInsightError
from .scanner import read_selected_file, scan_project

__version__ = "0.1.0"

__all__ = [
    "scan_project",
    "read_selected_file",
    "analyze_content",
    "analyze_project",
    "create_client",
    "Outcome",
    "Failure",
    "FailureKind",
    "RepoInsightError",
    "DirectoryScanError",
    "MissingCredentialError",
]
