"""Exceptions raised at the edges of blockcode (loading and configuration).

Code generation itself never raises for a well-formed project.
"""

from pathlib import Path


class BlockcodeError(Exception):
    pass


class ProjectLoadError(BlockcodeError):
    def __init__(self, msg: str, path: Path | None = None):
        super().__init__(f"{path}: {msg}" if path else msg)
        self.path = path


class ConfigError(BlockcodeError):
    pass
