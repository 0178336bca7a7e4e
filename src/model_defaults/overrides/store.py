"""Persist overrides into config.toml without disturbing its formatting."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional

import tomlkit
from tomlkit import TOMLDocument
from tomlkit.exceptions import TOMLKitError

from ..config import CONFIG_TOML_FILE
from ..errors import ConfigParseError, ConfigPersistError
from .apply import Override, apply_override, scope_to_profile
from .profile import resolve_profile

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _read_text(path: Path) -> Optional[str]:
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None


class ConfigTomlStore:
    def __init__(self, home: Path | str, file_name: str = CONFIG_TOML_FILE):
        self.home = Path(home)
        self.path = self.home / file_name

    def read_document(self) -> TOMLDocument:
        """Parse the config file, or return an empty document if it does not exist."""
        text = _read_text(self.path)
        if text is None:
            logger.debug("%s not found, starting from an empty document", self.path)
            return tomlkit.document()
        try:
            return tomlkit.parse(text)
        except TOMLKitError as exc:
            raise ConfigParseError(self.path, str(exc)) from exc

    def write_text(self, text: str) -> None:
        """Atomically replace the config file with ``text``.

        The new content goes to a unique temporary file in the same directory
        which is then renamed over the destination; the temporary file is
        removed if anything fails before the rename completes.
        """
        _ensure_dir(self.home)
        try:
            handle = tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                dir=self.home,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            )
        except OSError as exc:
            raise ConfigPersistError(self.path, str(exc)) from exc

        tmp_path = Path(handle.name)
        try:
            with handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise ConfigPersistError(self.path, str(exc)) from exc
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def persist(self, overrides: Iterable[Override], profile: Optional[str] = None) -> Path:
        """Apply ``overrides`` in order and write the result back.

        ``profile`` takes precedence over the document's own ``profile`` key.
        Parse and read failures abort before anything is written.
        """
        doc = self.read_document()
        effective_profile = resolve_profile(doc, profile)
        logger.debug("Persisting overrides to %s (profile=%r)", self.path, effective_profile)

        count = 0
        for override in overrides:
            segments = scope_to_profile(override.segments, effective_profile)
            logger.debug("Setting %s", segments)
            apply_override(doc, segments, override.value)
            count += 1

        self.write_text(doc.as_string())
        logger.info("Wrote %d override(s) to %s", count, self.path)
        return self.path


def persist_overrides(
    home: Path | str,
    profile: Optional[str],
    overrides: Iterable[Override],
) -> Path:
    return ConfigTomlStore(home).persist(overrides, profile=profile)
