"""Manifest discovery and output-path mapping."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .errors import InputNotFound, InvalidInputExtension

logger = logging.getLogger(__name__)

SINGLE_FILE_SUFFIX = ".yml"
MANIFEST_SUFFIXES: tuple[str, ...] = (".yml", ".yaml")
OUTPUT_SUFFIX = ".env"


def is_manifest_name(name: str) -> bool:
    return name.endswith(MANIFEST_SUFFIXES)


def output_path_for(manifest: Path, output_dir: Path) -> Path:
    """``<output_dir>/<name without its last extension>.env``.

    Everything from the last ``.`` is dropped, so a manifest named ``.yml``
    maps to ``.env``.
    """
    name = Path(manifest).name
    base, dot, _ = name.rpartition(".")
    return Path(output_dir) / ((base if dot else name) + OUTPUT_SUFFIX)


class ManifestWalk:
    """Lazy, restartable walk over the manifests under *root*.

    Every iteration re-walks the tree. Directory and file names are visited
    in sorted order; only regular files ending in ``.yml`` / ``.yaml`` are
    yielded. Unreadable directories are logged and skipped.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def __iter__(self) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=self._on_error):
            dirnames.sort()
            for name in sorted(filenames):
                if not is_manifest_name(name):
                    continue
                path = Path(dirpath) / name
                if path.is_file():
                    yield path

    @staticmethod
    def _on_error(exc: OSError) -> None:
        logger.warning("[traverse] skipping %s: %s", exc.filename, exc.strerror or exc)


def check_single_file(path: Path) -> Path:
    """Validate a single-file input before any I/O on it."""
    path = Path(path)
    if not str(path).endswith(SINGLE_FILE_SUFFIX):
        raise InvalidInputExtension(path)
    return path


def plan_inputs(input_path: str | Path) -> tuple[bool, Path | ManifestWalk]:
    """Return ``(is_directory, target)`` for *input_path*.

    *target* is a :class:`ManifestWalk` for directories and the validated
    file path otherwise.
    """
    path = Path(input_path)
    if not path.exists():
        raise InputNotFound(path)
    if path.is_dir():
        return True, ManifestWalk(path)
    return False, check_single_file(path)
