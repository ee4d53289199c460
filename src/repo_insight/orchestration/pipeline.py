"""
End-to-end flow: read one file or scan the project, then ask the model about it.
"""

from dataclasses import dataclass, field
from pathlib import Path

from ..analyzer import analyze_content, analyze_project
from ..analyzer.analyzer import DEFAULT_MODEL
from ..analyzer.client import ChatClient
from ..results import Outcome
from ..scanner import read_selected_file, scan_project
from ..scanner.scanner import ProjectMap


@dataclass
class PipelineResult:
    """Result of one repo-insight run."""
    mode: str  # "file" or "project"
    analysis: Outcome[str]
    file_path: str | None = None
    file_content: str = ""
    structure: ProjectMap = field(default_factory=dict)

    @property
    def error(self) -> str | None:
        if self.analysis.failure is None:
            return None
        return self.analysis.failure.message


def run_pipeline(
    client: ChatClient | None,
    *,
    root: str | Path = ".",
    file_path: str | Path | None = None,
    read_files: bool = False,
    model: str = DEFAULT_MODEL,
    custom_prompt: str | None = None,
) -> PipelineResult:
    """
    With file_path: read that file and analyze its text. A rejected or
    unreadable file still goes to the model, as the message text.
    Otherwise: scan root and analyze the structure.
    DirectoryScanError and MissingCredentialError propagate.
    """
    if file_path is not None:
        content = read_selected_file(file_path).text
        analysis = analyze_content(client, content, model=model, custom_prompt=custom_prompt)
        return PipelineResult(
            mode="file",
            analysis=analysis,
            file_path=str(file_path),
            file_content=content,
        )

    structure = scan_project(root, read_files=read_files)
    analysis = analyze_project(client, structure, model=model, custom_prompt=custom_prompt)
    return PipelineResult(mode="project", analysis=analysis, structure=structure)
