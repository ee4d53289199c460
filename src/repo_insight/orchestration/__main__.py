"""
repo-insight CLI: scan the project (or read one file) and ask the model about it.
  repo-insight [--read] [--root .] [--model gpt-4o-mini] [--prompt "..."]
  repo-insight --file src/app.py [--prompt "..."]
  python -m repo_insight.orchestration ...
"""

import argparse
import json
import sys
from pathlib import Path

from ..analyzer import create_client
from ..config import PROVIDERS, ConfigError, load_settings
from ..logging_utils import configure_logging
from ..results import RepoInsightError
from ..scanner import render_tree
from .pipeline import PipelineResult, run_pipeline


def _print_text(result: PipelineResult, tree: bool) -> None:
    if result.mode == "file":
        print(f"Reading file: {result.file_path}\n")
        print(result.file_content)
        print("\n=== FILE ANALYSIS ===\n")
    else:
        print("\n=== PROJECT STRUCTURE ===\n")
        print(render_tree(result.structure) if tree else json.dumps(result.structure, indent=2, ensure_ascii=False))
        print("\n=== PROJECT ANALYSIS ===\n")
    print(result.analysis.text)


def _print_json(result: PipelineResult) -> None:
    out = {
        "mode": result.mode,
        "analysis": result.analysis.value,
        "error": result.error,
    }
    if result.mode == "file":
        out["file_path"] = result.file_path
        out["file_content"] = result.file_content
    else:
        out["structure"] = result.structure
    print(json.dumps(out, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Scan a project (or read one file) and get an AI analysis of it"
    )
    ap.add_argument("--file", "-f", help="Analyze this file instead of scanning the project")
    ap.add_argument("--read", action="store_true", help="Include file contents in the project scan")
    ap.add_argument("--root", "-r", default=".", type=Path, help="Project root to scan (default: .)")
    ap.add_argument("--model", "-m", help="Model name (default: gpt-4o-mini, or llama3 for Ollama)")
    ap.add_argument("--prompt", "-p", help="Custom prompt for the model")
    ap.add_argument("--provider", choices=PROVIDERS, help="Model provider (default: REPO_INSIGHT_PROVIDER or openai)")
    ap.add_argument("--ollama-host", help="Ollama host (default: localhost:11434)")
    ap.add_argument("--tree", action="store_true", help="Print the structure as an ASCII tree")
    ap.add_argument("--json", action="store_true", help="Output result as JSON")
    ap.add_argument("--log-level", help="Logging level (default: WARNING)")
    args = ap.parse_args(argv)

    try:
        settings = load_settings(provider=args.provider)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or settings.log_level)
    settings = settings.with_overrides(ollama_host=args.ollama_host)

    try:
        result = run_pipeline(
            create_client(settings),
            root=args.root,
            file_path=args.file,
            read_files=args.read,
            model=args.model or settings.default_model,
            custom_prompt=args.prompt,
        )
    except RepoInsightError as e:
        if args.json:
            print(json.dumps({"error": str(e), "kind": e.failure.kind.value}, indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        _print_json(result)
    else:
        _print_text(result, args.tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
