"""YAML secret manifest loading.

A manifest is a YAML document with a single ``secrets`` mapping::

    secrets:
      DATABASE_URL: postgres://db.internal:5432/app
      DATABASE_PASSWORD: vault://kv/app/db#password

Values are kept as raw strings; ``vault://`` syntax is checked later by
:mod:`vault2file.references`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ManifestParseError, ManifestReadError

logger = logging.getLogger(__name__)


class ScalarTextLoader(yaml.SafeLoader):
    """Safe loader that keeps the source text of typed scalars.

    ``0012``, ``0x1F``, ``yes`` and ``2024-01-01`` load as the strings
    written in the document. ``null`` / ``~`` still load as ``None``.
    """


def _construct_text(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


for _tag in ("bool", "int", "float", "timestamp"):
    ScalarTextLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _construct_text)


class ManifestDocument(BaseModel):
    """Schema of one manifest document. Unknown top-level keys are ignored."""

    secrets: dict[str, str]


@dataclass
class Manifest:
    """The ordered ``name -> raw value`` entries of one manifest file."""

    source: Path
    secrets: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.secrets)

    def items(self):
        return self.secrets.items()


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid"))
    return "; ".join(parts)


def load_manifest(data: bytes, source: Path) -> Manifest:
    """Parse manifest *data* read from *source*.

    Raises :class:`~vault2file.errors.ManifestParseError` when the bytes are
    not YAML or the document does not hold a ``secrets`` mapping of strings.
    """
    source = Path(source)
    try:
        doc = yaml.load(data, Loader=ScalarTextLoader)
    except yaml.YAMLError as exc:
        raise ManifestParseError(source, f"invalid YAML: {exc}") from exc

    if not isinstance(doc, dict):
        raise ManifestParseError(source, "expected a mapping with a 'secrets' key")

    try:
        parsed = ManifestDocument.model_validate(doc)
    except ValidationError as exc:
        raise ManifestParseError(source, _describe(exc)) from exc

    return Manifest(source=source, secrets=dict(parsed.secrets))


def read_manifest(path: Path) -> Manifest:
    """Read and parse the manifest file at *path*."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ManifestReadError(path, exc) from exc
    manifest = load_manifest(data, path)
    logger.debug("[manifest] loaded %s (%d entries)", path, len(manifest))
    return manifest
