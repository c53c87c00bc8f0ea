"""Run settings -- read from the environment and an optional ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from ..util.env_file import EnvFile

OUTPUT_DIR_ENV = "VAULT2FILE_OUTPUT_DIR"


@dataclass(frozen=True)
class RunConfig:
    """Explicit configuration threaded through one run.

    Empty Vault settings defer to the hvac client's own defaults
    (``VAULT_ADDR``, ``VAULT_TOKEN``, ``~/.vault-token``).
    """

    output_dir: Path = Path(".")
    vault_addr: str = ""
    vault_token: str = ""
    vault_namespace: str = ""

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv: str | Path | None = None,
    ) -> RunConfig:
        """Build a config from *environ* (default ``os.environ``), falling
        back to the dotenv file at *dotenv* / ``$DOTENV_PATH`` / ``.env``.
        """
        env = os.environ if environ is None else environ
        file_values = EnvFile(dotenv or env.get("DOTENV_PATH") or ".env").read_all()

        def e(key: str) -> str:
            return (env.get(key) or file_values.get(key) or "").strip()

        return cls(
            output_dir=Path(e(OUTPUT_DIR_ENV) or "."),
            vault_addr=e("VAULT_ADDR").rstrip("/"),
            vault_token=e("VAULT_TOKEN"),
            vault_namespace=e("VAULT_NAMESPACE"),
        )

    def with_overrides(
        self,
        *,
        output_dir: str | Path | None = None,
        vault_addr: str | None = None,
    ) -> RunConfig:
        """Return a copy with the non-``None`` overrides applied."""
        changes: dict[str, object] = {}
        if output_dir is not None:
            changes["output_dir"] = Path(output_dir)
        if vault_addr is not None:
            changes["vault_addr"] = vault_addr.strip().rstrip("/")
        return replace(self, **changes)
