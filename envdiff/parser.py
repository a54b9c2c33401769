"""Parse dotenv-style files into ParsedFile structures.

Malformed lines (no '=') are skipped without complaint; real-world env files
are noisy and the comparison only cares about assignments.
"""
import os
import re
from typing import Dict, Iterable, List

from .errors import SourceNotFoundError, SourceUnreadableError
from .models import Entry, ParsedFile

ASSIGNMENT_RE = re.compile(r"^([^=]+)=(.*)$")
# the first '#' must follow whitespace: 'bar#baz' is a literal value
INLINE_COMMENT_RE = re.compile(r"^([^#]*)\s+#\s*(.*)$")
QUOTES = ('"', "'")


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse(content: str, path: str) -> ParsedFile:
    entries: Dict[str, Entry] = {}
    comments: List[str] = []

    for idx, raw in enumerate(content.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            comments.append(line)
            continue
        m = ASSIGNMENT_RE.match(line)
        if not m:
            continue
        key = m.group(1).strip()
        raw_value = m.group(2)

        comment = None
        if raw_value.startswith(QUOTES):
            # '#' inside quotes is part of the value
            value = _strip_quotes(raw_value)
        else:
            value = raw_value
            cm = INLINE_COMMENT_RE.match(value)
            if cm:
                value, comment = cm.group(1), cm.group(2)

        entries[key] = Entry(key=key, value=value.strip(), source_line=idx, inline_comment=comment)

    return ParsedFile(path=path, entries=entries, standalone_comments=comments)


def load(path: str) -> str:
    """Read an env file as UTF-8 (BOM dropped), raising SourceNotFoundError / SourceUnreadableError."""
    if not os.path.isfile(path):
        raise SourceNotFoundError(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableError(path, str(e)) from e


def parse_file(path: str) -> ParsedFile:
    return parse(load(path), path)


def needs_quotes(value: str) -> bool:
    if value == "" or "#" in value or any(c.isspace() for c in value):
        return True
    # would otherwise lose a layer of quotes when read back
    return len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]


def format_assignment(key: str, value: str) -> str:
    return f'{key}="{value}"' if needs_quotes(value) else f"{key}={value}"


def generate_env_content(entries: Iterable[Entry]) -> str:
    """Render entries back into KEY=value lines."""
    return "\n".join(format_assignment(e.key, e.value) for e in entries)
