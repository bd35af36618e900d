"""Command-line entry point.

Usage::

    solution-scaffolder
    solution-scaffolder --output ./platform --config scaffold.yaml
    python -m solution_scaffolder --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import ScaffoldConfig
from .generator import SolutionGenerator
from .toolchain import ScaffoldError
from .utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solution-scaffolder",
        description="Scaffold a multi-project .NET integration platform solution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  solution-scaffolder\n"
            "  solution-scaffolder -o ./platform\n"
            "  solution-scaffolder --config scaffold.yaml --verbose\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON or YAML configuration file (default: embedded configuration)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Echo every external command before it runs",
    )
    return parser


def load_config(path: str | None) -> ScaffoldConfig:
    """Load the configuration file, or the embedded defaults plus environment."""
    if path is None:
        return ScaffoldConfig.from_env()
    return ScaffoldConfig.load(path)


def main(argv: list[str] | None = None) -> int:
    """Run the scaffolder; return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    generator = SolutionGenerator(config, verbose=args.verbose)
    try:
        asyncio.run(generator.generate(Path(args.output)))
    except (ScaffoldError, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


def run() -> None:
    """Console-script wrapper that exits with ``main``'s status."""
    sys.exit(main())
