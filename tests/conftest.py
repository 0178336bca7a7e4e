import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from model_defaults.config import CONFIG_TOML_FILE  # noqa: E402


@pytest.fixture()
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def write_config(home):
    def _write(text: str) -> Path:
        path = home / CONFIG_TOML_FILE
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture()
def read_config(home):
    def _read() -> str:
        path = home / CONFIG_TOML_FILE
        return path.read_bytes().decode("utf-8") if path.exists() else ""

    return _read
