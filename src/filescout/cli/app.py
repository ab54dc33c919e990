# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Optional
import logging

import typer

from ..adapters.local_fs import LocalFS
from ..adapters.logging_reporter import LoggingReporter
from ..domain.errors import FilesystemError
from ..domain.walk import WalkAction
from ..services import DirectoryWalker, largest_file

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="filescout CLI - find large files and walk directory trees")

logger = logging.getLogger(__name__)


def _wire(sort: bool = False) -> tuple[LocalFS, DirectoryWalker]:
    """
    Minimal composition root:
      LocalFS + LoggingReporter -> DirectoryWalker
    """
    fs = LocalFS(sort=sort)
    walker = DirectoryWalker(fs, LoggingReporter())
    return fs, walker


def _set_verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


@app.command()
def largest(
    path: Path = typer.Option(
        Path("."),
        "--path",
        file_okay=False,
        dir_okay=True,
        help="Directory to search (recursively)",
    ),
    sort: bool = typer.Option(
        False, "--sorted", help="Visit directory entries in name order."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the largest file under a directory.
    """
    _set_verbose(verbose)
    fs, walker = _wire(sort=sort)
    try:
        found = largest_file(walker, fs, path)
    except FilesystemError as e:
        typer.echo(f"Could not read file size: {e}", err=True)
        raise typer.Exit(code=1)

    if found is None:
        typer.echo("No files to analyse.")
    else:
        typer.echo(f"Largest file: {found.item} ({int(found.score)} bytes)")


@app.command()
def walk(
    path: Path = typer.Option(
        Path("."),
        "--path",
        file_okay=False,
        dir_okay=True,
        help="Directory to walk",
    ),
    cancel_on: str = typer.Option(
        "important",
        "--cancel-on",
        help="Stop the search at the first file whose name contains this text. "
        "Pass an empty string to never cancel.",
    ),
    sort: bool = typer.Option(
        False, "--sorted", help="Visit directory entries in name order."
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress the final summary line.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Walk a directory tree, printing each file found.
    """
    _set_verbose(verbose)
    _, walker = _wire(sort=sort)

    def on_file_found(file_path: Path) -> WalkAction:
        typer.echo(f"Found file: {file_path}")
        if cancel_on and cancel_on in file_path.name:
            typer.echo(f"Found '{cancel_on}' file; cancelling search.")
            return WalkAction.CANCEL
        return WalkAction.CONTINUE

    result = walker.walk(path, on_file_found)

    if quiet:
        return

    if result.cancelled:
        summary = f"Search cancelled after {result.files_visited} files."
    else:
        summary = f"Search complete; visited {result.files_visited} files."
    if result.failed_directories:
        summary = summary[:-1] + (
            f" ({len(result.failed_directories)} directories could not be read)."
        )
    typer.echo(summary)
