"""Exception hierarchy for the manifest -> env pipeline.

Errors are grouped by the scope they abort:

- :class:`EntryError` -- a single manifest entry is skipped.
- :class:`FileError` -- a whole manifest is skipped (directory mode) or the
  run is aborted (single-file mode).
- :class:`RunError` -- the run is aborted before any manifest is touched.
"""

from __future__ import annotations

from pathlib import Path


class Vault2FileError(Exception):
    """Base class for every error raised by vault2file."""


# -- entry scope -------------------------------------------------------------


class EntryError(Vault2FileError):
    """Resolution of one manifest entry failed."""


class InvalidReferenceSyntax(EntryError):
    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"invalid reference {raw!r}: {reason}")


class BackendUnavailable(EntryError):
    """The backend read for ``mount/path`` raised."""

    def __init__(self, mount: str, path: str, cause: BaseException) -> None:
        self.mount = mount
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read {mount}/{path}: {cause}")


class KeyNotFound(EntryError):
    def __init__(self, mount: str, path: str, key: str) -> None:
        self.mount = mount
        self.path = path
        self.key = key
        super().__init__(f"field {key!r} not found in {mount}/{path}")


# -- file scope --------------------------------------------------------------


class FileError(Vault2FileError):
    """Processing of one manifest file failed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{path}: {message}")


class ManifestReadError(FileError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, f"error reading file: {cause}")


class ManifestParseError(FileError):
    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"error parsing manifest: {reason}")


class OutputWriteError(FileError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, f"failed to write output file: {cause}")


# -- run scope ---------------------------------------------------------------


class RunError(Vault2FileError):
    """The run cannot start."""


class InvalidInputExtension(RunError):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"input file must have .yml extension: {path}")


class InputNotFound(RunError):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"error accessing input: {path} does not exist")
