"""CLI - Command line interface for the generation client."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import load_raw_config, load_settings
from .config_validator import Severity, has_errors, validate_config
from .core.extraction import extract_structured
from .core.generation import GenerationClient
from .observability import setup_logging

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resume-ai", description="Resume AI generation client")
    parser.add_argument("--config", default="config/config.local.yaml", help="YAML config overlay")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at INFO level")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate text for a prompt")
    gen.add_argument("prompt", help="Prompt text ('-' reads stdin)")
    gen.add_argument("--max-tokens", type=int, default=None)
    gen.add_argument("--temperature", type=float, default=None)
    gen.add_argument("--timeout", type=float, default=None, help="Deadline in seconds for the request")
    gen.add_argument("--json", action="store_true", help="Extract and pretty-print a JSON value")

    sub.add_parser("config", help="Show effective settings and validation issues")
    return parser


async def run_generate(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    client = GenerationClient(settings)
    prompt = sys.stdin.read() if args.prompt == "-" else args.prompt

    try:
        result = await client.generate_text(
            prompt,
            max_tokens=args.max_tokens,
            temperature=args.temperature,
            timeout=args.timeout,
        )
    except ValueError as e:
        console.print(f"Invalid request: {e}", style="red", markup=False)
        return 2

    if not result.ok:
        console.print(f"✗ {result.kind.value}: {result.detail[:500]}", style="red", markup=False)
        return 1

    if args.json:
        outcome = extract_structured(result.text, None)
        if not outcome.recovered:
            console.print("✗ No JSON value could be recovered from the response", style="yellow")
            console.print(result.text, markup=False)
            return 1
        console.print_json(json.dumps(outcome.value))
    else:
        console.print(Panel(Text(result.text), title="live" if client.live_mode else "mock"))
    return 0


def run_config(args: argparse.Namespace) -> int:
    raw = load_raw_config(args.config)
    settings = load_settings(args.config)

    table = Table(title="Effective settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.redacted().items():
        table.add_row(key, str(value))
    console.print(table)

    issues = validate_config(raw)
    for issue in issues:
        style = "red" if issue.severity == Severity.ERROR else "yellow"
        console.print(f"[{issue.severity.value}] {issue.field}: {issue.message}", style=style, markup=False)
    return 1 if has_errors(issues) else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    if args.command == "generate":
        return asyncio.run(run_generate(args))
    return run_config(args)


if __name__ == "__main__":
    sys.exit(main())
