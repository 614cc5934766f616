# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# Añadimos src al sys.path para que funcionen los imports "core.…", "cli.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Sin variables FIATCONV_* ni .env del usuario durante los tests."""

    for key in list(os.environ):
        if key.upper().startswith("FIATCONV_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
