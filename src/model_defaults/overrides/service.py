"""Public entry points for persisting the default model and reasoning effort."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import ReasoningEffort
from .apply import PROFILES_KEY, Override
from .profile import resolve_profile
from .store import ConfigTomlStore, persist_overrides

MODEL_KEY = "model"
EFFORT_KEY = "model_reasoning_effort"


@dataclass
class PersistedDefaults:
    profile: str | None
    model: str | None
    effort: str | None


def set_default_model_for_profile(home: Path | str, profile: Optional[str], model: str) -> Path:
    """Persist ``model`` under ``[profiles.<profile>]``, or the active profile / top level when ``profile`` is None."""
    return persist_overrides(home, profile, [Override((MODEL_KEY,), model)])


def set_default_model(home: Path | str, model: str) -> Path:
    return set_default_model_for_profile(home, None, model)


def set_default_effort_for_profile(
    home: Path | str,
    profile: Optional[str],
    effort: ReasoningEffort | str,
) -> Path:
    """Persist the reasoning effort as its lowercase name, e.g. ``"high"``."""
    level = ReasoningEffort(effort)
    return persist_overrides(home, profile, [Override((EFFORT_KEY,), level.value)])


def set_default_effort(home: Path | str, effort: ReasoningEffort | str) -> Path:
    return set_default_effort_for_profile(home, None, effort)


def read_defaults(home: Path | str, profile: Optional[str] = None) -> PersistedDefaults:
    """Report the model and effort stored for the effective profile, without merging anything."""
    doc = ConfigTomlStore(home).read_document()
    effective_profile = resolve_profile(doc, profile)
    table = doc
    if effective_profile is not None:
        profiles = doc.get(PROFILES_KEY)
        table = profiles.get(effective_profile) if isinstance(profiles, dict) else None
    if not isinstance(table, dict):
        return PersistedDefaults(profile=effective_profile, model=None, effort=None)
    return PersistedDefaults(
        profile=effective_profile,
        model=_string_or_none(table.get(MODEL_KEY)),
        effort=_string_or_none(table.get(EFFORT_KEY)),
    )


def _string_or_none(value) -> str | None:
    if isinstance(value, str):
        return value.unwrap()
    return None
