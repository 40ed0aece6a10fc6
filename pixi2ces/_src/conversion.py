import logging
from typing import Iterable, Optional, Tuple

from typing_extensions import assert_never

from pixi2ces._src.exceptions import (
    EnvironmentNotFound,
    MissingDigest,
    NoPlatform,
    PlatformNotFound,
    UnsupportedPackageKind,
)
from pixi2ces._src.models.explicit import ExplicitEntry, ExplicitSpec
from pixi2ces._src.models.lockfile import LockedDocument
from pixi2ces._src.models.package import CondaPackage, LockedPackage, PypiPackage
from pixi2ces._src.utils import set_fragment


logger = logging.getLogger(__name__)


def select_packages(document: LockedDocument, environment: str, platform: str) -> Tuple[LockedPackage, ...]:
    """Return the packages locked for one environment on one platform"""
    platforms = document.environments.get(environment)
    if platforms is None:
        raise EnvironmentNotFound(environment, available=document.environments)

    packages = platforms.get(platform)
    if packages is None:
        raise PlatformNotFound(environment, platform, available=platforms)
    return packages


def filter_conda_packages(packages: Iterable[LockedPackage], allow_non_conda: bool = False) -> Tuple[CondaPackage, ...]:
    """Keep the conda packages, in order.

    PyPI packages abort the conversion unless `allow_non_conda` is set,
    in which case they are skipped with a warning.
    """
    conda_packages = []
    for pkg in packages:
        match pkg:
            case CondaPackage():
                conda_packages.append(pkg)
            case PypiPackage():
                if not allow_non_conda:
                    raise UnsupportedPackageKind(pkg)
                logger.warning(
                    "ignoring PyPI package %s since PyPI packages are not supported", pkg.name
                )
            case _:
                assert_never(pkg)
    return tuple(conda_packages)


def build_explicit_spec(platform: Optional[str], conda_packages: Iterable[CondaPackage]) -> ExplicitSpec:
    """Pin every package url to its md5 and wrap them up for `platform`"""
    if platform is None:
        raise NoPlatform("build")

    entries = []
    for pkg in conda_packages:
        if pkg.md5 is None:
            raise MissingDigest(pkg)
        entries.append(ExplicitEntry(url=set_fragment(pkg.url, pkg.md5)))

    return ExplicitSpec(platform=platform, packages=tuple(entries))


def convert_lockfile(
    document: LockedDocument,
    environment: str,
    platform: str,
    allow_non_conda: bool = False,
) -> ExplicitSpec:
    packages = select_packages(document, environment, platform)
    logger.debug(
        "Selected %d packages for environment %s on %s", len(packages), environment, platform
    )
    conda_packages = filter_conda_packages(packages, allow_non_conda=allow_non_conda)
    return build_explicit_spec(platform, conda_packages)
