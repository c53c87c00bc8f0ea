"""Tests for run configuration."""

from __future__ import annotations

from pathlib import Path

from vault2file.config.settings import RunConfig


class TestRunConfig:
    def test_defaults(self) -> None:
        cfg = RunConfig.from_env(environ={}, dotenv="/nonexistent/.env")
        assert cfg == RunConfig()
        assert cfg.output_dir == Path(".")

    def test_from_process_env(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("VAULT_ADDR", "https://vault.internal:8200/")
        monkeypatch.setenv("VAULT_TOKEN", "hvs.token")
        monkeypatch.setenv("VAULT_NAMESPACE", "team")
        monkeypatch.setenv("VAULT2FILE_OUTPUT_DIR", str(tmp_path))
        cfg = RunConfig.from_env()
        assert cfg.vault_addr == "https://vault.internal:8200"
        assert cfg.vault_token == "hvs.token"
        assert cfg.vault_namespace == "team"
        assert cfg.output_dir == tmp_path

    def test_dotenv_fallback(self, tmp_path: Path) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text('VAULT_ADDR="http://file:8200"\nVAULT_TOKEN=from-file\n')
        cfg = RunConfig.from_env(environ={"VAULT_TOKEN": "from-env"}, dotenv=dotenv)
        assert cfg.vault_addr == "http://file:8200"
        assert cfg.vault_token == "from-env"

    def test_dotenv_path_env(self, tmp_path: Path) -> None:
        dotenv = tmp_path / "custom.env"
        dotenv.write_text("VAULT_NAMESPACE=ns\n")
        cfg = RunConfig.from_env(environ={"DOTENV_PATH": str(dotenv)})
        assert cfg.vault_namespace == "ns"

    def test_overrides(self) -> None:
        base = RunConfig(vault_addr="http://a")
        cfg = base.with_overrides(output_dir="out", vault_addr="http://b/")
        assert cfg.output_dir == Path("out")
        assert cfg.vault_addr == "http://b"
        assert base.vault_addr == "http://a"

    def test_none_overrides_keep_values(self) -> None:
        base = RunConfig(output_dir=Path("x"), vault_addr="http://a")
        assert base.with_overrides() == base
