"""Override persistence for config.toml."""

from .apply import Override, apply_override, scope_to_profile
from .profile import resolve_profile
from .service import (
    PersistedDefaults,
    read_defaults,
    set_default_effort,
    set_default_effort_for_profile,
    set_default_model,
    set_default_model_for_profile,
)
from .store import ConfigTomlStore, persist_overrides

__all__ = [
    "ConfigTomlStore",
    "Override",
    "PersistedDefaults",
    "apply_override",
    "persist_overrides",
    "read_defaults",
    "resolve_profile",
    "scope_to_profile",
    "set_default_effort",
    "set_default_effort_for_profile",
    "set_default_model",
    "set_default_model_for_profile",
]
