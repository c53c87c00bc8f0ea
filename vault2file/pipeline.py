"""Manifest -> resolve -> render driver.

One manifest is processed completely (load, resolve every entry, render,
write, close) before the next one starts. Entry failures are logged and
skipped; file failures are fatal for a single-file run and skipped during a
directory walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config.settings import RunConfig
from .errors import EntryError, FileError, OutputWriteError
from .manifest import read_manifest
from .references import parse_reference
from .resolver import SecretBackend, resolve_reference
from .traversal import output_path_for, plan_inputs
from .util.env_file import render_line

logger = logging.getLogger(__name__)


@dataclass
class EntryFailure:
    name: str
    raw: str
    error: EntryError


@dataclass
class FileReport:
    """Outcome of one manifest."""

    source: Path
    output: Path
    written: list[str] = field(default_factory=list)
    failures: list[EntryFailure] = field(default_factory=list)


@dataclass
class FileFailure:
    source: Path
    error: FileError


@dataclass
class RunReport:
    """Outcome of a whole run."""

    directory_mode: bool = False
    files: list[FileReport] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def entries_written(self) -> int:
        return sum(len(f.written) for f in self.files)

    @property
    def entries_skipped(self) -> int:
        return sum(len(f.failures) for f in self.files)


def render_entry(name: str, raw: str, backend: SecretBackend) -> str:
    """Parse, resolve and render one manifest entry."""
    value = resolve_reference(parse_reference(raw), backend)
    return render_line(name, value)


def process_manifest(path: Path, config: RunConfig, backend: SecretBackend) -> FileReport:
    """Turn the manifest at *path* into ``<output_dir>/<stem>.env``.

    Raises :class:`~vault2file.errors.FileError` subclasses; entry errors are
    recorded on the returned report instead.
    """
    path = Path(path)
    manifest = read_manifest(path)
    output = output_path_for(path, config.output_dir)
    report = FileReport(source=path, output=output)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8", newline="\n") as fh:
            for name, raw in manifest.items():
                try:
                    line = render_entry(name, raw, backend)
                except EntryError as exc:
                    logger.warning("[pipeline] %s: skipping %s (%s): %s", path, name, raw, exc)
                    report.failures.append(EntryFailure(name=name, raw=raw, error=exc))
                    continue
                fh.write(line)
                report.written.append(name)
    except OSError as exc:
        raise OutputWriteError(output, exc) from exc

    logger.info("[pipeline] Created %s successfully", output)
    return report


def run(
    input_path: str | Path,
    config: RunConfig,
    backend: SecretBackend | None = None,
) -> RunReport:
    """Process a single ``.yml`` manifest or every manifest under a directory.

    Raises :class:`~vault2file.errors.RunError` for unusable input and, in
    single-file mode, the manifest's :class:`~vault2file.errors.FileError`.
    """
    is_dir, target = plan_inputs(input_path)

    if backend is None:
        from .services.vault import VaultBackend

        backend = VaultBackend(config)

    report = RunReport(directory_mode=is_dir)
    if not is_dir:
        report.files.append(process_manifest(target, config, backend))
        return report

    claimed: dict[Path, Path] = {}
    for path in target:
        output = output_path_for(path, config.output_dir)
        if output in claimed:
            logger.warning(
                "[pipeline] %s overwrites %s written from %s", path, output, claimed[output],
            )
        claimed[output] = path
        try:
            report.files.append(process_manifest(path, config, backend))
        except FileError as exc:
            logger.error("[pipeline] Error processing %s: %s", path, exc)
            report.failures.append(FileFailure(source=path, error=exc))
    return report
