"""Optional YAML settings file for envdiff.

Example .envdiff.yaml:

    show_identical: true
    format: table
    strict: false
    export_from: first
    sensitive_patterns:
      - secret
      - password
      - dsn
"""
import os
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .output import SENSITIVE_PATTERNS

DEFAULT_CONFIG_FILE = ".envdiff.yaml"
FORMATS = ("simple", "table")
SIDES = ("first", "second")


@dataclass(frozen=True)
class Settings:
    show_values: bool = False
    show_identical: bool = False
    strict: bool = False
    format: str = "simple"
    export_from: str = "first"
    sensitive_patterns: List[str] = field(default_factory=lambda: list(SENSITIVE_PATTERNS))

    def override(self, **kwargs) -> "Settings":
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})


def _check(data: Dict[str, Any], source: str) -> Dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    out: Dict[str, Any] = {}
    for k, v in data.items():
        if k not in known:
            print(f"WARN {source}: ignoring unknown setting '{k}'", file=sys.stderr)
            continue
        if k in ("show_values", "show_identical", "strict"):
            if not isinstance(v, bool):
                raise ConfigError(f"{source}: '{k}' must be true or false")
        elif k == "format":
            if v not in FORMATS:
                raise ConfigError(f"{source}: 'format' must be one of {', '.join(FORMATS)}")
        elif k == "export_from":
            if v not in SIDES:
                raise ConfigError(f"{source}: 'export_from' must be one of {', '.join(SIDES)}")
        elif k == "sensitive_patterns":
            if not isinstance(v, list) or not all(isinstance(p, str) for p in v):
                raise ConfigError(f"{source}: 'sensitive_patterns' must be a list of strings")
        out[k] = v
    return out


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from `path`, or from .envdiff.yaml in the working directory if present."""
    if path is None:
        if not os.path.isfile(DEFAULT_CONFIG_FILE):
            return Settings()
        path = DEFAULT_CONFIG_FILE
    elif not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return Settings(**_check(data, path))
