"""Exceptions raised while editing the persisted configuration file."""

from __future__ import annotations

from pathlib import Path


class ModelDefaultsError(Exception):
    """Base class for model-defaults errors."""


class ConfigParseError(ModelDefaultsError):
    """Raised when the existing config file is not valid TOML.

    Nothing is written when this is raised.
    """

    def __init__(self, path: Path, message: str):
        super().__init__(f"Invalid TOML in {path}: {message}")
        self.path = path


class ConfigPersistError(ModelDefaultsError):
    """Raised when the temporary file cannot be written or swapped into place."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"Unable to persist {path}: {message}")
        self.path = path
