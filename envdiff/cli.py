#!/usr/bin/env python3
"""
envdiff

Purpose:
  Compare two .env files and report variables missing on either side and
  variables whose values differ. The validate sub-command checks a concrete
  .env file against its .env.example template.

Features:
  - Sectioned report (default) or aligned table (--format table)
  - Values of sensitive-looking keys (secret, password, key, token, auth,
    credential, private) are masked unless --show-values
  - --json dumps the full comparison result for CI
  - --export writes the missing variables of one side as a ready-to-paste .env fragment
  - Defaults can be set in .envdiff.yaml (or --config PATH)

Examples:
  envdiff .env .env.production
  envdiff .env.staging .env.production --format table --show-identical
  envdiff .env .env.example --export missing.env --export-from second
  envdiff .env .env.example --json
  envdiff validate .env .env.example --strict

Exit Codes:
  0 no differences / validation passed (always 0 with --json)
  1 differences found, validation failed, file not found or unexpected error
  130 interrupted
"""
import argparse
import json
import os
import sys
from typing import List, Optional

from . import __version__
from .compare import compare
from .config import FORMATS, SIDES, load_settings
from .errors import EnvDiffError
from .output import generate_export_content, render_comparison, render_validation, to_json
from .parser import parse_file
from .validate import validate


def compare_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="envdiff",
        description="Compare .env files and find missing or different variables "
                    "(use 'envdiff validate -h' for template validation)",
    )
    p.add_argument("file1", help="First .env file")
    p.add_argument("file2", help="Second .env file")
    p.add_argument("--json", action="store_true", help="Output results as JSON")
    p.add_argument("--show-identical", action="store_true", default=None, help="List identical variables")
    p.add_argument("--show-values", action="store_true", default=None, help="Show all values (including sensitive)")
    p.add_argument("--format", choices=FORMATS, help="Report layout (default: simple)")
    p.add_argument("--export", metavar="FILE", help="Export missing variables to FILE")
    p.add_argument("--export-from", choices=SIDES,
                   help="Side whose extra variables are exported (default: first)")
    p.add_argument("--config", help="Settings file (default: ./.envdiff.yaml if present)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def validate_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="envdiff validate", description="Validate .env file against .env.example")
    p.add_argument("env_file", help=".env file to check")
    p.add_argument("example_file", help="Template (.env.example) listing required variables")
    p.add_argument("--strict", action="store_true", default=None,
                   help="Fail if env has extra variables not in example")
    p.add_argument("--json", action="store_true", help="Output the validation report as JSON")
    p.add_argument("--config", help="Settings file (default: ./.envdiff.yaml if present)")
    return p


def run_compare(argv: List[str]) -> int:
    args = compare_parser().parse_args(argv)
    settings = load_settings(args.config).override(
        show_values=args.show_values,
        show_identical=args.show_identical,
        format=args.format,
        export_from=args.export_from,
    )
    first = parse_file(os.path.abspath(args.file1))
    second = parse_file(os.path.abspath(args.file2))
    result = compare(first, second)

    if args.json:
        print(to_json(result))
        return 0

    print(render_comparison(result, settings.show_values, settings.show_identical,
                            settings.format, settings.sensitive_patterns))

    if args.export:
        missing = result.missing_in_second if settings.export_from == "first" else result.missing_in_first
        if not missing:
            print("No missing variables to export.")
        else:
            with open(args.export, "w", encoding="utf-8") as f:
                f.write(generate_export_content(missing, settings.export_from))
            print(f"Exported {len(missing)} variables to: {args.export}")
        print()
    elif result.missing_in_second:
        print("Tip: use --export <file> to export missing variables")

    return 1 if result.has_differences else 0


def run_validate(argv: List[str]) -> int:
    args = validate_parser().parse_args(argv)
    settings = load_settings(args.config).override(strict=args.strict)
    template = parse_file(os.path.abspath(args.example_file))
    concrete = parse_file(os.path.abspath(args.env_file))
    report = validate(template, concrete, strict=settings.strict)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print(render_validation(report))
    return 0 if report.passed else 1


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        if argv and argv[0] == "validate":
            return run_validate(argv[1:])
        return run_compare(argv)
    except EnvDiffError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
