import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from typing_extensions import Annotated

from pixi2ces import __version__
from pixi2ces._src.constants import DEFAULT_ENVIRONMENT, DEFAULT_MANIFEST
from pixi2ces._src.conversion import convert_lockfile
from pixi2ces._src.exceptions import Pixi2CesError
from pixi2ces._src.explicit import write_explicit_spec
from pixi2ces._src.lock import read_lockfile
from pixi2ces._src.utils import (
    configure_logging,
    current_platform,
    lockfile_path,
    log_level,
    output_path,
)


logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool):
    if value:
        print(f"pixi2ces {__version__}")
        raise typer.Exit()


@app.command()
def main(
    manifest_path: Annotated[
        Optional[Path],
        typer.Argument(
            help="The path to 'pixi.toml' or 'pyproject.toml' [default: ./pixi.toml]",
            show_default=False,
        ),
    ] = None,
    environment: Annotated[str, typer.Option(
        "--environment", "-e",
        help="Environment to render"
    )] = DEFAULT_ENVIRONMENT,
    platform: Annotated[Optional[str], typer.Option(
        "--platform", "-p",
        help="Platform to render [default: current platform]",
        show_default=False,
    )] = None,
    ignore_pypi_errors: Annotated[bool, typer.Option(
        "--ignore-pypi-errors",
        help="PyPI dependencies are not supported. This flag allows packing even if PyPI dependencies are present.",
    )] = False,
    verbose: Annotated[int, typer.Option(
        "--verbose", "-v",
        count=True,
        help="More output per occurrence"
    )] = 0,
    quiet: Annotated[int, typer.Option(
        "--quiet", "-q",
        count=True,
        help="Less output per occurrence"
    )] = 0,
    version: Annotated[Optional[bool], typer.Option(
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Print version and exit"
    )] = None,
):
    """Render a pixi lockfile environment as a conda explicit spec.

    Writes conda-<platform>-<environment>.lock to the current directory.
    """
    configure_logging(log_level(verbose, quiet))
    logger.debug("Starting pixi2ces CLI")

    # resolve the host platform once so the whole run agrees on it
    if platform is None:
        platform = current_platform()
    if manifest_path is None:
        manifest_path = Path.cwd() / DEFAULT_MANIFEST

    try:
        document = read_lockfile(lockfile_path(manifest_path))
        spec = convert_lockfile(
            document,
            environment=environment,
            platform=platform,
            allow_non_conda=ignore_pypi_errors,
        )
        target = output_path(platform, environment)
        logger.info("Creating conda lock file %s", target)
        write_explicit_spec(target, spec)
    except Pixi2CesError as err:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(err))}", soft_wrap=True)
        raise typer.Exit(code=1)
