"""Set comparison of two parsed env files."""
from typing import Dict, List

from .models import ComparisonResult, Diff, DiffStatus, ParsedFile
from .parser import parse_file


def _char_rank(c: str) -> int:
    if c.isalpha():
        return 2
    if c.isdigit():
        return 1
    return 0


def sort_key(diff: Diff):
    """Collation-style key: punctuation < digits < letters, case-insensitive,
    lowercase first among keys that differ only in case."""
    key = diff.key
    return (tuple((_char_rank(c), c.casefold()) for c in key), key.swapcase())


def compare(first: ParsedFile, second: ParsedFile) -> ComparisonResult:
    buckets: Dict[DiffStatus, List[Diff]] = {status: [] for status in DiffStatus}

    for key in set(first.entries) | set(second.entries):
        a = first.entries.get(key)
        b = second.entries.get(key)
        if a is None:
            diff = Diff(key, DiffStatus.MISSING_IN_FIRST, second_value=b.value, second_line=b.source_line)
        elif b is None:
            diff = Diff(key, DiffStatus.MISSING_IN_SECOND, first_value=a.value, first_line=a.source_line)
        else:
            status = DiffStatus.IDENTICAL if a.value == b.value else DiffStatus.DIFFERENT
            diff = Diff(key, status, a.value, b.value, a.source_line, b.source_line)
        buckets[diff.status].append(diff)

    for diffs in buckets.values():
        diffs.sort(key=sort_key)

    return ComparisonResult(
        first_file=first.path,
        second_file=second.path,
        missing_in_first=buckets[DiffStatus.MISSING_IN_FIRST],
        missing_in_second=buckets[DiffStatus.MISSING_IN_SECOND],
        different=buckets[DiffStatus.DIFFERENT],
        identical=buckets[DiffStatus.IDENTICAL],
        total_first=len(first.entries),
        total_second=len(second.entries),
    )


def compare_files(first_path: str, second_path: str) -> ComparisonResult:
    """Load, parse and compare two env files."""
    return compare(parse_file(first_path), parse_file(second_path))


def are_identical(result: ComparisonResult) -> bool:
    return not result.has_differences


def get_summary(result: ComparisonResult) -> Dict[str, int]:
    return {
        "total": len({d.key for d in result.all_diffs()}),
        "identical": len(result.identical),
        "different": len(result.different),
        "missingInFirst": len(result.missing_in_first),
        "missingInSecond": len(result.missing_in_second),
    }
