import sys
import pathlib

# Ensure project root is importable in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture
def env_file(tmp_path):
    """Write `content` to tmp_path/name and return the path as a string."""
    def _write(name, content):
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return str(p)
    return _write


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
