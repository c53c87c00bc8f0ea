"""Shared pytest fixtures for vault2file tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from vault2file.config.settings import RunConfig

from .fakes import FakeBackend


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("VAULT_ADDR", "VAULT_TOKEN", "VAULT_NAMESPACE", "VAULT2FILE_OUTPUT_DIR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / "missing.env"))


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend({
        ("kv", "app"): {"password": "s3cr3t", "port": 5432, "debug": True},
        ("kv", "team/db"): {"user": "admin"},
    })


@pytest.fixture()
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture()
def config(out_dir: Path) -> RunConfig:
    return RunConfig(output_dir=out_dir)


@pytest.fixture()
def write_manifest(tmp_path: Path):
    def _write(relpath: str, body: str) -> Path:
        path = tmp_path / "manifests" / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body)
        return path

    return _write
