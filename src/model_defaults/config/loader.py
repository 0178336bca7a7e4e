"""Locate the configuration home directory and its config.toml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

CONFIG_TOML_FILE = "config.toml"
HOME_ENV_VAR = "MODEL_DEFAULTS_HOME"
DEFAULT_HOME = Path("~/.model-defaults")


class HomeSettings(BaseModel):
    home: Path = Field(..., description="Directory holding config.toml")
    config_file: str = Field(CONFIG_TOML_FILE, min_length=1)

    @property
    def config_path(self) -> Path:
        return self.home / self.config_file


def load_home_settings(home: Optional[Path | str] = None) -> HomeSettings:
    """Resolve the home directory: explicit argument, then $MODEL_DEFAULTS_HOME, then ~/.model-defaults."""
    load_dotenv()
    if home is None:
        env_home = os.getenv(HOME_ENV_VAR)
        home = Path(env_home) if env_home else DEFAULT_HOME
    return HomeSettings(home=Path(home).expanduser())


def resolve_config_path(home: Optional[Path | str] = None) -> Path:
    return load_home_settings(home).config_path
