"""Human-readable and machine-readable rendering of comparison results.

Masking is display policy only; Diff values are never altered.
"""
import json
from typing import Iterable, List, Optional, Sequence

from .compare import get_summary
from .models import ComparisonResult, Diff
from .parser import format_assignment
from .validate import ValidationReport

SENSITIVE_PATTERNS = [
    "secret", "password", "key", "token", "auth", "credential", "private", "api_key",
]

RULE = "-" * 50


def is_sensitive(key: str, patterns: Optional[Sequence[str]] = None) -> bool:
    lkey = key.lower()
    return any(p.lower() in lkey for p in (SENSITIVE_PATTERNS if patterns is None else patterns))


def mask_value(value: str) -> str:
    if len(value) <= 4:
        return "****"
    return value[:2] + "****" + value[-2:]


def display_value(key: str, value: Optional[str], show_values: bool,
                  patterns: Optional[Sequence[str]] = None) -> str:
    if not value:
        return "(empty)"
    if not show_values and is_sensitive(key, patterns):
        return mask_value(value)
    return value


def render_table(header: List[str], body: Iterable[List]) -> List[str]:
    rows = [header] + [list(r) for r in body]
    widths = [max(len(str(row[i])) for row in rows) for i in range(len(header))]
    lines = []
    for i, row in enumerate(rows):
        lines.append("  ".join(str(cell).ljust(widths[j]) for j, cell in enumerate(row)).rstrip())
        if i == 0:
            lines.append("  ".join("-" * w for w in widths))
    return lines


def _summary_lines(result: ComparisonResult) -> List[str]:
    s = get_summary(result)
    return [
        RULE,
        "Summary:",
        f"   Missing in file 1: {s['missingInFirst']}",
        f"   Missing in file 2: {s['missingInSecond']}",
        f"   Different values:  {s['different']}",
        f"   Identical:         {s['identical']}",
        "",
    ]


def _render_simple(result: ComparisonResult, show_values: bool, show_identical: bool,
                   patterns: Optional[Sequence[str]]) -> List[str]:
    lines: List[str] = []

    if result.missing_in_first:
        lines.append(f"[MISSING] Missing in {result.first_file}:")
        for d in result.missing_in_first:
            lines.append(f"   - {d.key}")
            if show_values or not is_sensitive(d.key, patterns):
                lines.append(f"     Value in file 2: {display_value(d.key, d.second_value, show_values, patterns)}")
        lines.append("")

    if result.missing_in_second:
        lines.append(f"[MISSING] Missing in {result.second_file}:")
        for d in result.missing_in_second:
            lines.append(f"   - {d.key}")
            if show_values or not is_sensitive(d.key, patterns):
                lines.append(f"     Value in file 1: {display_value(d.key, d.first_value, show_values, patterns)}")
        lines.append("")

    if result.different:
        lines.append("[CHANGED] Different values:")
        for d in result.different:
            lines.append(f"   - {d.key}")
            lines.append(f"     File 1: {display_value(d.key, d.first_value, show_values, patterns)}")
            lines.append(f"     File 2: {display_value(d.key, d.second_value, show_values, patterns)}")
        lines.append("")

    if show_identical and result.identical:
        lines.append(f"[OK] Identical ({len(result.identical)} variables):")
        lines.extend(f"   - {d.key}" for d in result.identical)
        lines.append("")
    elif result.identical:
        lines.append(f"[OK] Identical: {len(result.identical)} variables")
        lines.append("")
    return lines


def _render_table(result: ComparisonResult, show_values: bool, show_identical: bool,
                  patterns: Optional[Sequence[str]]) -> List[str]:
    diffs = result.missing_in_first + result.missing_in_second + result.different
    if show_identical:
        diffs = diffs + result.identical
    rows = []
    for d in diffs:
        rows.append([
            d.key,
            d.status.value,
            "-" if d.first_value is None else display_value(d.key, d.first_value, show_values, patterns),
            "-" if d.second_value is None else display_value(d.key, d.second_value, show_values, patterns),
        ])
    return render_table(["Key", "Status", "File 1", "File 2"], rows) + [""]


def render_comparison(result: ComparisonResult, show_values: bool = False, show_identical: bool = False,
                      fmt: str = "simple", patterns: Optional[Sequence[str]] = None) -> str:
    lines = [
        "",
        "Environment Comparison",
        RULE,
        "",
        "Comparing:",
        f"  1. {result.first_file}",
        f"  2. {result.second_file}",
        "",
    ]

    if not result.has_differences:
        lines.append("[OK] Files are identical!")
        lines.append(f"   {len(result.identical)} variables match perfectly.")
        lines.append("")
        return "\n".join(lines)

    if fmt == "table":
        lines.extend(_render_table(result, show_values, show_identical, patterns))
    elif fmt == "simple":
        lines.extend(_render_simple(result, show_values, show_identical, patterns))
    else:
        raise ValueError(f"unknown format: {fmt}")
    lines.extend(_summary_lines(result))
    return "\n".join(lines)


def render_validation(report: ValidationReport) -> str:
    lines = ["", "Environment Validation", RULE, ""]

    if report.missing_required:
        lines.append("[ERROR] Missing required variables:")
        lines.extend(f"   - {d.key}" for d in report.missing_required)
        lines.append("")

    if report.extra:
        if report.strict:
            lines.append("[ERROR] Extra variables not in example (strict mode):")
        else:
            lines.append("[WARN] Extra variables not in example:")
        lines.extend(f"   - {d.key}" for d in report.extra)
        lines.append("")

    if report.passed:
        lines.append("[OK] Validation passed!")
        lines.append(f"   All {report.present_count} required variables are present.")
        lines.append("")
    return "\n".join(lines)


def to_json(result: ComparisonResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def generate_export_content(diffs: Iterable[Diff], source: str) -> str:
    """Re-render diffs as env assignments using the values of `source` ('first' or 'second')."""
    lines = [
        "# Missing variables - exported from envdiff",
        "# Add these to your .env file",
        "",
    ]
    for d in diffs:
        value = d.value_from(source)
        if value is None:
            lines.append(f"{d.key}=")
        else:
            lines.append(format_assignment(d.key, value))
    return "\n".join(lines)
