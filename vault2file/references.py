"""Parse manifest values into literals or ``vault://`` backend references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import InvalidReferenceSyntax

VAULT_REF_PREFIX = "vault://"


@dataclass(frozen=True)
class Literal:
    """A plain value written to the output as-is."""

    value: str


@dataclass(frozen=True)
class BackendRef:
    """A ``vault://<mount>/<path>#<key>`` reference."""

    mount: str
    path: str
    key: str

    def __str__(self) -> str:
        return f"{VAULT_REF_PREFIX}{self.mount}/{self.path}#{self.key}"


@dataclass(frozen=True)
class InvalidReference:
    """A value carrying the ``vault://`` prefix that does not parse."""

    raw: str
    reason: str

    def to_error(self) -> InvalidReferenceSyntax:
        return InvalidReferenceSyntax(self.raw, self.reason)


Reference = Union[Literal, BackendRef, InvalidReference]


def is_vault_ref(value: str) -> bool:
    return value.startswith(VAULT_REF_PREFIX)


def parse_reference(raw: str) -> Reference:
    """Classify *raw* without raising.

    The key is everything after the first ``#`` and the mount is everything
    before the first ``/``, so ``vault://kv/team/app#a#b`` reads field
    ``a#b`` at ``team/app`` on mount ``kv``.
    """
    if not is_vault_ref(raw):
        return Literal(raw)

    location, sep, key = raw[len(VAULT_REF_PREFIX):].partition("#")
    if not sep:
        return InvalidReference(raw, "missing key separator '#'")

    mount, sep, path = location.partition("/")
    if not sep:
        return InvalidReference(raw, "missing mount separator '/'")

    return BackendRef(mount=mount, path=path, key=key)
