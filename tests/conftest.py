"""Shared pytest fixtures for specifier parsing tests."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent

# module-level loggers read the config on import
os.environ.setdefault("SPECPARSE_CONFIG_DIR", str(REPO_ROOT))

from specparse.ReadConfig import ReadConfig  # noqa: E402
from specparse.singleton import Singleton  # noqa: E402


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point ReadConfig at an empty temporary base dir and reset the singleton."""

    (tmp_path / "config").mkdir()
    monkeypatch.setenv("SPECPARSE_CONFIG_DIR", str(tmp_path))
    Singleton.clear(ReadConfig)
    yield tmp_path
    Singleton.clear(ReadConfig)


@pytest.fixture
def write_config(config_dir: Path):
    """Write config.json under the temporary base dir."""

    def _write(data: object) -> Path:
        path = config_dir / "config" / "config.json"
        _ = path.write_text(json.dumps(data), encoding="utf-8")
        Singleton.clear(ReadConfig)
        return path

    return _write
