"""Command-line interface for license_detector.

Provides subcommands to detect the license of files and directories, write
a Markdown report, and list the known licenses and license file names.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from license_detector.candidates import DEFAULT_LICENSE_FILES
from license_detector.catalog import CATALOG
from license_detector.errors import LicenseError
from license_detector.loader import license_from_path
from license_detector.models import DetectionResult
from license_detector.reporters import MarkdownReporter

app = typer.Typer(
    name="license-detector",
    help="Identify the open source license of files and directories.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("license_detector")


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("license_detector").setLevel(level)


def _detect_all(paths: list[Path]) -> list[DetectionResult]:
    """Detect the license of every path, collecting failures per path.

    This is shared logic used by both the detect and report commands.

    Args:
        paths: Files or directories to inspect.

    Returns:
        One DetectionResult per path, in input order.
    """
    results = []
    for path in paths:
        try:
            lic = license_from_path(path)
        except (LicenseError, OSError, UnicodeDecodeError) as e:
            logger.debug(f"Detection failed for {path}: {e}")
            results.append(DetectionResult(source=path, error=str(e)))
            continue
        results.append(DetectionResult(source=path, license=lic))
    return results


PathsArgument = Annotated[
    list[Path],
    typer.Argument(help="License files or project directories to inspect"),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]


@app.command()
def detect(
    paths: PathsArgument,
    verbose: VerboseOption = False,
) -> None:
    """Detect the license of files or directories.

    Exit codes:
        0 - A license was detected for every path
        1 - Detection failed for at least one path
    """
    _setup_logging(verbose)

    results = _detect_all(paths)

    table = Table(title="Detected licenses")
    table.add_column("Path")
    table.add_column("License")
    table.add_column("File")
    for result in results:
        if result.ok:
            table.add_row(
                str(result.source),
                f"[green]{result.license.spdx_id}[/green]",
                str(result.license.file),
            )
        else:
            table.add_row(str(result.source), "[red]unknown[/red]", "")
    console.print(table)

    failures = [r for r in results if not r.ok]
    for result in failures:
        err_console.print(f"[red]Error:[/red] {result.error}")

    raise typer.Exit(code=1 if failures else 0)


@app.command()
def report(
    paths: PathsArgument,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path",
        ),
    ] = Path("licenses.md"),
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            envvar="LICENSE_DETECTOR_TEMPLATE",
            help="Custom Jinja2 template file",
            exists=True,
            readable=True,
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Write a Markdown report of the licenses of files or directories."""
    _setup_logging(verbose)

    results = _detect_all(paths)
    detected = sum(1 for r in results if r.ok)
    console.print(f"Detected licenses for [bold]{detected}[/bold]/{len(results)} paths")

    reporter = MarkdownReporter(template_path=template)

    try:
        reporter.write(results, output)
    except OSError as e:
        err_console.print(f"[red]Error writing output:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Generated:[/green] {output}")


@app.command()
def known() -> None:
    """List the licenses that can be detected."""
    for entry in CATALOG:
        console.print(f"[bold]{entry.spdx_id}[/bold]  {entry.name}")


@app.command()
def candidates() -> None:
    """List the file names searched for in directories."""
    for name in DEFAULT_LICENSE_FILES:
        console.print(name)


if __name__ == "__main__":
    app()
