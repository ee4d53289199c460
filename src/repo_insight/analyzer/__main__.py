"""
Analyze a single file with the model.
  python -m repo_insight.analyzer --file src/app.py [--model gpt-4o-mini] [--prompt "..."]
  Use --file - to read the text from stdin (no extension check).
"""

import argparse
import sys

from ..config import PROVIDERS, ConfigError, load_settings
from ..logging_utils import configure_logging
from ..results import MissingCredentialError
from ..scanner import read_selected_file
from .analyzer import analyze_content
from .client import create_client


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Analyze one file with a chat model")
    ap.add_argument("--file", "-f", required=True, help="File to analyze ('-' for stdin)")
    ap.add_argument("--model", "-m", help="Model name (default depends on provider)")
    ap.add_argument("--prompt", "-p", help="Instruction placed before the file content")
    ap.add_argument("--provider", choices=PROVIDERS, help="Model provider (default: REPO_INSIGHT_PROVIDER or openai)")
    ap.add_argument("--ollama-host", help="Ollama host (default: localhost:11434)")
    ap.add_argument("--log-level", help="Logging level (default: WARNING)")
    args = ap.parse_args(argv)

    try:
        settings = load_settings(provider=args.provider)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or settings.log_level)
    settings = settings.with_overrides(ollama_host=args.ollama_host)

    if args.file == "-":
        content = sys.stdin.read()
    else:
        content = read_selected_file(args.file).text

    try:
        result = analyze_content(
            create_client(settings),
            content,
            model=args.model or settings.default_model,
            custom_prompt=args.prompt,
        )
    except MissingCredentialError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
