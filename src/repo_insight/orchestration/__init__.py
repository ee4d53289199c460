"""
Orchestration.
Single pipeline: file or project scan → model → analysis.
"""

from .pipeline import PipelineResult, run_pipeline

__all__ = ["run_pipeline", "PipelineResult"]
