"""Command-line entry point for ``vault2file``.

Reads YAML secret manifests, fetches ``vault://`` references from Vault and
writes one ``.env`` file per manifest.

Usage::

    vault2file                       # every manifest under the current dir
    vault2file secrets/app.yml -o out/
    vault2file deploy/ --vault https://vault.internal:8200
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.markup import escape

from vault2file.config.settings import RunConfig
from vault2file.errors import FileError, RunError
from vault2file.pipeline import RunReport, run
from vault2file.resolver import SecretBackend

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vault2file",
        description=(
            "Read YAML secret manifests, fetch secrets from Vault, "
            "and generate the corresponding ENV files."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=".",
        help="Manifest file (.yml) or directory to walk (default: current directory).",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output directory for ENV files (default: VAULT2FILE_OUTPUT_DIR or '.').",
    )
    parser.add_argument(
        "-v", "--vault",
        type=str,
        default=os.getenv("VAULT_ADDR"),
        help="Vault server address (default: VAULT_ADDR).",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors.",
    )
    return parser


def _configure_logging(quiet: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _print_summary(report: RunReport) -> None:
    console.print(
        f"[bold green]{len(report.files)}[/bold green] file(s) written, "
        f"{report.entries_written} entries"
    )
    if report.entries_skipped:
        console.print(f"[yellow]{report.entries_skipped} entries skipped[/yellow]")
        for f in report.files:
            for failure in f.failures:
                console.print(
                    f"  [dim]{escape(str(f.source))}[/dim] "
                    f"{escape(failure.name)}: {escape(str(failure.error))}"
                )
    if report.failures:
        console.print(f"[red]{len(report.failures)} file(s) skipped[/red]")
        for failure in report.failures:
            console.print(f"  {escape(str(failure.error))}")


def execute(args: argparse.Namespace, backend: SecretBackend | None = None) -> int:
    """Run with parsed *args* and return the process exit code."""
    config = RunConfig.from_env().with_overrides(
        output_dir=args.output, vault_addr=args.vault,
    )
    try:
        report = run(args.input, config, backend)
    except (RunError, FileError) as exc:
        logger.error("[cli] %s", exc)
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1
    _print_summary(report)
    return 0


def main() -> None:
    """CLI entry point for ``vault2file``."""
    args = _build_parser().parse_args()
    _configure_logging(args.quiet)
    sys.exit(execute(args))


if __name__ == "__main__":
    main()
