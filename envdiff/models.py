"""Data types shared by the parser, comparator and renderers."""
import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Entry:
    key: str
    value: str
    source_line: int
    inline_comment: Optional[str] = None


@dataclass(frozen=True)
class ParsedFile:
    path: str
    entries: Mapping[str, Entry] = field(default_factory=dict, hash=False)
    standalone_comments: Tuple[str, ...] = ()

    def __post_init__(self):
        # freeze the containers handed in by the parser
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(self, "standalone_comments", tuple(self.standalone_comments))


class DiffStatus(enum.Enum):
    MISSING_IN_FIRST = "missing-in-first"
    MISSING_IN_SECOND = "missing-in-second"
    DIFFERENT = "different"
    IDENTICAL = "identical"


@dataclass(frozen=True)
class Diff:
    key: str
    status: DiffStatus
    first_value: Optional[str] = None
    second_value: Optional[str] = None
    first_line: Optional[int] = None
    second_line: Optional[int] = None

    def value_from(self, side: str) -> Optional[str]:
        """Return the value of the given side ('first' or 'second')."""
        if side == "first":
            return self.first_value
        if side == "second":
            return self.second_value
        raise ValueError(f"side must be 'first' or 'second', got {side!r}")

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"key": self.key, "status": self.status.value}
        if self.first_value is not None:
            out["firstValue"] = self.first_value
        if self.second_value is not None:
            out["secondValue"] = self.second_value
        if self.first_line is not None:
            out["firstLine"] = self.first_line
        if self.second_line is not None:
            out["secondLine"] = self.second_line
        return out


@dataclass(frozen=True)
class ComparisonResult:
    first_file: str
    second_file: str
    missing_in_first: List[Diff]
    missing_in_second: List[Diff]
    different: List[Diff]
    identical: List[Diff]
    total_first: int
    total_second: int

    @property
    def has_differences(self) -> bool:
        return bool(self.missing_in_first or self.missing_in_second or self.different)

    def all_diffs(self) -> List[Diff]:
        return self.missing_in_first + self.missing_in_second + self.different + self.identical

    def to_dict(self) -> Dict[str, Any]:
        return {
            "firstFile": self.first_file,
            "secondFile": self.second_file,
            "missingInFirst": [d.to_dict() for d in self.missing_in_first],
            "missingInSecond": [d.to_dict() for d in self.missing_in_second],
            "different": [d.to_dict() for d in self.different],
            "identical": [d.to_dict() for d in self.identical],
            "totalFirst": self.total_first,
            "totalSecond": self.total_second,
        }
