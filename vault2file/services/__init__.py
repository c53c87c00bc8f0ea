"""Secret backend integrations."""

from .vault import VaultBackend

__all__ = ["VaultBackend"]
