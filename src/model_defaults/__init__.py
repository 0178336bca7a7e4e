"""model-defaults: persist default model and reasoning effort into config.toml."""

from importlib.metadata import version as _version

__all__ = ["get_version"]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return _version("model-defaults")
    except Exception:  # pragma: no cover - fallback for editable installs
        return "0.0.0"
