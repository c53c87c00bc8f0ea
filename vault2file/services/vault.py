"""HashiCorp Vault integration -- KV v2 secret reads."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import hvac

from ..config.settings import RunConfig

logger = logging.getLogger(__name__)


class VaultBackend:
    """Reads KV v2 secrets through :mod:`hvac`.

    The client is created on first read so that building a backend never
    touches the network.
    """

    def __init__(self, config: RunConfig | None = None, client: Any = None) -> None:
        self._config = config or RunConfig()
        self._client: Any = client

    @property
    def client(self) -> Any:
        self._ensure_init()
        return self._client

    def read_secret(self, mount: str, path: str) -> Mapping[str, Any]:
        """Return the ``data.data`` fields stored at *path* on *mount*."""
        response = self.client.secrets.kv.v2.read_secret_version(
            path=path,
            mount_point=mount,
            raise_on_deleted_version=True,
        )
        data = (response or {}).get("data") or {}
        return data.get("data") or {}

    def _ensure_init(self) -> None:
        if self._client is not None:
            return
        cfg = self._config
        self._client = hvac.Client(
            url=cfg.vault_addr or None,
            token=cfg.vault_token or None,
            namespace=cfg.vault_namespace or None,
        )
        logger.info("[vault] client configured for %s", self._client.url)
