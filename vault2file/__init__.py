"""vault2file -- render YAML secret manifests into ``.env`` files."""

from .config.settings import RunConfig
from .errors import (
    BackendUnavailable,
    EntryError,
    FileError,
    InputNotFound,
    InvalidInputExtension,
    InvalidReferenceSyntax,
    KeyNotFound,
    ManifestParseError,
    ManifestReadError,
    OutputWriteError,
    RunError,
    Vault2FileError,
)
from .pipeline import RunReport, process_manifest, run

__all__ = [
    "BackendUnavailable",
    "EntryError",
    "FileError",
    "InputNotFound",
    "InvalidInputExtension",
    "InvalidReferenceSyntax",
    "KeyNotFound",
    "ManifestParseError",
    "ManifestReadError",
    "OutputWriteError",
    "RunConfig",
    "RunError",
    "RunReport",
    "Vault2FileError",
    "process_manifest",
    "run",
]
