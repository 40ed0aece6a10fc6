import logging
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from rattler import Subdir
from rich.console import Console
from rich.logging import RichHandler

from pixi2ces._src.constants import LOCKFILE_NAME, OUTPUT_FILENAME_TEMPLATE


LOG_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


def current_platform() -> str:
    return str(Subdir.current())


def set_fragment(url: str, fragment: str) -> str:
    """Return `url` with its fragment replaced by `fragment`"""
    return urlunsplit(urlsplit(url)._replace(fragment=fragment))


def lockfile_path(manifest_path: str | Path) -> Path:
    """The lockfile that belongs to a pixi.toml or pyproject.toml manifest"""
    return Path(manifest_path).absolute().parent / LOCKFILE_NAME


def output_path(platform: str, environment: str, directory: str | Path | None = None) -> Path:
    if directory is None:
        directory = Path.cwd()
    return Path(directory) / OUTPUT_FILENAME_TEMPLATE.format(
        platform=platform, environment=environment
    )


def log_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map -v/-q counts onto a logging level, WARNING when neither is given"""
    index = LOG_LEVELS.index(logging.WARNING) + verbose - quiet
    return LOG_LEVELS[max(0, min(index, len(LOG_LEVELS) - 1))]


def configure_logging(level: int) -> logging.Logger:
    logger = logging.getLogger("pixi2ces")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
    return logger
