"""Compare .env files and find missing or different variables."""

__version__ = "1.0.0"

from .compare import are_identical, compare, compare_files, get_summary
from .errors import ConfigError, EnvDiffError, SourceNotFoundError, SourceUnreadableError
from .models import ComparisonResult, Diff, DiffStatus, Entry, ParsedFile
from .parser import generate_env_content, load, parse, parse_file
from .validate import ValidationReport, validate

__all__ = [
    "ComparisonResult", "ConfigError", "Diff", "DiffStatus", "Entry", "EnvDiffError", "ParsedFile",
    "SourceNotFoundError", "SourceUnreadableError", "ValidationReport",
    "are_identical", "compare", "compare_files", "generate_env_content", "get_summary",
    "load", "parse", "parse_file", "validate",
]
