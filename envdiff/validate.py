"""Validate a concrete env file against a template (.env.example).

Validation is a reading of compare(template, concrete): keys only in the
template are missing required variables, keys only in the concrete file are
extras. Extras fail validation only in strict mode.
"""
from dataclasses import dataclass
from typing import List

from .compare import compare
from .models import ComparisonResult, Diff, ParsedFile


@dataclass(frozen=True)
class ValidationReport:
    result: ComparisonResult
    strict: bool = False

    @property
    def template_file(self) -> str:
        return self.result.first_file

    @property
    def env_file(self) -> str:
        return self.result.second_file

    @property
    def missing_required(self) -> List[Diff]:
        return self.result.missing_in_second

    @property
    def extra(self) -> List[Diff]:
        return self.result.missing_in_first

    @property
    def present_count(self) -> int:
        return len(self.result.identical) + len(self.result.different)

    @property
    def passed(self) -> bool:
        if self.missing_required:
            return False
        return not (self.strict and self.extra)

    def to_dict(self):
        return {
            "envFile": self.env_file,
            "templateFile": self.template_file,
            "strict": self.strict,
            "passed": self.passed,
            "missingRequired": [d.key for d in self.missing_required],
            "extra": [d.key for d in self.extra],
            "present": self.present_count,
        }


def validate(template: ParsedFile, concrete: ParsedFile, strict: bool = False) -> ValidationReport:
    return ValidationReport(result=compare(template, concrete), strict=strict)
