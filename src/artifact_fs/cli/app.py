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

from ..domain.errors import ConfigurationError, ExecutableNotFoundError, FilesystemError
from ..domain.models import Filter
from ..operations import human_readable_size
from ..services import ExecutableResolver, WalkErrorPolicy, get_file_info, walk_directory

from ..logging_config import enable_verbose, setup_logging

setup_logging()

app = typer.Typer(help="artifact-fs - inspect build cache directories and executables")

logger = logging.getLogger(__name__)


# ------------------------------
# Helpers
# ------------------------------


def _set_verbose(verbose: bool) -> None:
    if verbose:
        enable_verbose()


def _parse_filter(
    include_ext: Optional[str],
    exclude_ext: Optional[str],
    include: Optional[str],
    exclude: Optional[str],
) -> Filter:
    """
    Build a Filter from the mutually exclusive filter options.
    Raises Typer BadParameter if more than one is given.
    """
    given = {
        "--include-ext": include_ext,
        "--exclude-ext": exclude_ext,
        "--include": include,
        "--exclude": exclude,
    }
    chosen = [name for name, value in given.items() if value]
    if len(chosen) > 1:
        raise typer.BadParameter(
            f"Only one filter option may be used at a time (got {', '.join(chosen)})"
        )
    if include_ext:
        return Filter.include_extension(include_ext)
    if exclude_ext:
        return Filter.exclude_extension(exclude_ext)
    if include:
        return Filter.include_substring(include)
    if exclude:
        return Filter.exclude_substring(exclude)
    return Filter()


def _parse_on_error(on_error: str) -> WalkErrorPolicy:
    try:
        return WalkErrorPolicy.parse(on_error)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e))


# ------------------------------
# CLI Commands
# ------------------------------


@app.command()
def walk(
    path: Path = typer.Option(
        ...,
        "--path",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory to walk",
    ),
    include_ext: Optional[str] = typer.Option(
        None, "--include-ext", help="Only list files with this extension (e.g. .o)"
    ),
    exclude_ext: Optional[str] = typer.Option(
        None, "--exclude-ext", help="Skip files with this extension"
    ),
    include: Optional[str] = typer.Option(
        None, "--include", help="Only list files whose name contains this text"
    ),
    exclude: Optional[str] = typer.Option(
        None, "--exclude", help="Skip files whose name contains this text"
    ),
    on_error: str = typer.Option(
        "skip",
        "--on-error",
        help="What to do with unreadable subtrees: skip or raise.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List a directory tree, contents before their directory.
    """
    _set_verbose(verbose)
    file_filter = _parse_filter(include_ext, exclude_ext, include, exclude)
    policy = _parse_on_error(on_error)

    try:
        entries = walk_directory(str(path), file_filter, on_error=policy)
    except FilesystemError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Walked %s: %d entries", path, len(entries))
    for info in entries:
        kind = "d" if info.is_dir else "f"
        typer.echo(f"{kind} {info.size} {info.path}")


@app.command()
def du(
    path: Path = typer.Option(
        ...,
        "--path",
        exists=True,
        resolve_path=True,
        help="File or directory to measure",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the total size of a file or directory tree.
    """
    _set_verbose(verbose)
    try:
        info = get_file_info(str(path))
    except FilesystemError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{human_readable_size(info.size)}\t{path}")


@app.command()
def info(
    path: Path = typer.Option(
        ...,
        "--path",
        resolve_path=True,
        help="File or directory to describe",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the metadata of a single file or directory.
    """
    _set_verbose(verbose)
    try:
        meta = get_file_info(str(path))
    except FilesystemError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"path: {meta.path}")
    typer.echo(f"kind: {'directory' if meta.is_dir else 'file'}")
    typer.echo(f"size: {meta.size} ({human_readable_size(meta.size)})")
    typer.echo(f"modify_time: {meta.modify_time}")
    typer.echo(f"access_time: {meta.access_time}")
    typer.echo(f"identity: {meta.identity}")


@app.command()
def which(
    program: str = typer.Argument(..., help="Command name or path"),
    exclude: str = typer.Option(
        "",
        "--exclude",
        help="Skip executables whose resolved name (without extension) is this",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Resolve a command to its real executable file.
    """
    _set_verbose(verbose)
    try:
        exe = ExecutableResolver().find(program, exclude=exclude)
    except ExecutableNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"real: {exe.real_path}")
    typer.echo(f"virtual: {exe.virtual_path}")
    typer.echo(f"invoked_as: {exe.invoked_as}")
