import logging
from pathlib import Path

import rattler.exceptions
from rattler import LockFile
from rattler.lock import CondaLockedPackage, LockedPackage, PypiLockedPackage

from pixi2ces._src.exceptions import LockfileUnreadable
from pixi2ces._src.models.lockfile import LockedDocument
from pixi2ces._src.models.package import CondaPackage, PypiPackage


logger = logging.getLogger(__name__)

# every error type py-rattler raises, plus io and parse failures
LOCKFILE_ERRORS = (OSError, ValueError) + tuple(
    obj for obj in vars(rattler.exceptions).values()
    if isinstance(obj, type) and issubclass(obj, Exception)
)


def read_lockfile(path: str | Path) -> LockedDocument:
    """Load a pixi lockfile into a LockedDocument

    Parameters
    ----------
    path : str | Path
        Path to the `pixi.lock` file

    Returns
    -------
    LockedDocument
        Every environment in the lockfile with its packages per platform

    Raises
    ------
    LockfileUnreadable
        If the file does not exist or rattler cannot parse it
    """
    path = Path(path)
    logger.debug("Reading lockfile %s", path)
    if not path.is_file():
        raise LockfileUnreadable(path, "file does not exist")

    try:
        lock_file = LockFile.from_path(path)
    except LOCKFILE_ERRORS as err:
        raise LockfileUnreadable(path, err) from err

    environments = {}
    for name, env in lock_file.environments():
        environments[name] = {
            str(platform): tuple(_to_package(pkg) for pkg in packages)
            for platform, packages in env.packages_by_platform().items()
        }
    return LockedDocument(environments=environments)


def _to_package(pkg: LockedPackage) -> CondaPackage | PypiPackage:
    if isinstance(pkg, CondaLockedPackage):
        record = pkg.package_record
        return CondaPackage(
            name=pkg.name,
            version=str(record.version),
            build=record.build,
            subdir=record.subdir,
            url=pkg.location,
            md5=record.md5,
            sha256=record.sha256,
        )
    if isinstance(pkg, PypiLockedPackage):
        return PypiPackage(
            name=pkg.name,
            version=str(pkg.version),
            url=pkg.location,
        )
    raise TypeError(f"unknown locked package type: {type(pkg).__name__}")
