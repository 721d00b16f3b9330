"""Blazor JS interop generator.

Generates C# wrapper classes for documented functions in JavaScript modules:

    jsinterop -i "wwwroot/js/**/*.js"
    jsinterop -i "wwwroot/js/*.js" --watch --namespace MyApp.Interop

Each input ``foo.js`` produces ``foo.cs`` beside it.
"""

from __future__ import annotations

import argparse
import logging

from .config import GeneratorConfig, default_namespace
from .files import generate_all, watch_and_generate

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    namespace = default_namespace()
    parser = argparse.ArgumentParser(
        prog="jsinterop",
        description="Blazor JS Interop Generator - Generate C# wrappers for JavaScript modules",
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Input JavaScript file pattern (supports wildcards like '**/*.js')",
    )
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Watch for file changes and regenerate automatically",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        default=namespace,
        help=f"C# namespace for the generated wrapper (default: {namespace})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GeneratorConfig(namespace=args.namespace)
    except ValueError as e:
        log.error("Error: %s", e)
        return 1

    if args.watch:
        failures = watch_and_generate(args.input, config)
    else:
        failures = generate_all(args.input, config)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
