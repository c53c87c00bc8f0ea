"""Resolve parsed references to concrete string values."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Protocol

from .errors import BackendUnavailable, KeyNotFound
from .references import BackendRef, InvalidReference, Literal, Reference

logger = logging.getLogger(__name__)


class SecretBackend(Protocol):
    """Anything that can read the key/value secret stored at ``mount/path``."""

    def read_secret(self, mount: str, path: str) -> Mapping[str, Any]: ...


def stringify(value: Any) -> str:
    """Return the canonical text form of a secret field value."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def resolve_backend_ref(ref: BackendRef, backend: SecretBackend) -> str:
    """Read *ref* from *backend* with exactly one backend call."""
    try:
        data = backend.read_secret(ref.mount, ref.path)
    except Exception as exc:
        raise BackendUnavailable(ref.mount, ref.path, exc) from exc

    logger.debug(
        "[resolver] fetched %s/%s (%d fields)", ref.mount, ref.path, len(data or {}),
    )
    if not data or ref.key not in data:
        raise KeyNotFound(ref.mount, ref.path, ref.key)
    return stringify(data[ref.key])


def resolve_reference(ref: Reference, backend: SecretBackend) -> str:
    """Resolve any parsed reference.

    Literals pass through without touching *backend*; invalid references
    raise :class:`~vault2file.errors.InvalidReferenceSyntax`.
    """
    if isinstance(ref, Literal):
        return ref.value
    if isinstance(ref, InvalidReference):
        raise ref.to_error()
    return resolve_backend_ref(ref, backend)
