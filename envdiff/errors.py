"""Exceptions raised by envdiff."""


class EnvDiffError(Exception):
    """Base class for envdiff failures the command line reports without a traceback."""


class SourceNotFoundError(EnvDiffError):
    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class SourceUnreadableError(EnvDiffError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(EnvDiffError):
    pass
