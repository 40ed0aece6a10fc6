"""Shared test fixtures."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from pixi2ces._src.models.lockfile import LockedDocument
from pixi2ces._src.models.package import CondaPackage, PypiPackage


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def pkg_a() -> CondaPackage:
    return CondaPackage(
        name="a",
        version="1.0",
        build="0",
        subdir="linux-64",
        url="https://repo/a-1.0-0.conda",
        md5="d41d8cd98f00b204e9800998ecf8427e",
    )


@pytest.fixture
def pkg_b() -> CondaPackage:
    return CondaPackage(
        name="b",
        version="2.0",
        build="0",
        subdir="linux-64",
        url="https://repo/b-2.0-0.conda",
        md5="e4d909c290d0fb1ca068ffaddf22cbd0",
    )


@pytest.fixture
def pypi_pkg() -> PypiPackage:
    return PypiPackage(
        name="requests",
        version="2.32.3",
        url="https://files.pythonhosted.org/packages/requests-2.32.3-py3-none-any.whl",
    )


@pytest.fixture
def document(pkg_a, pkg_b) -> LockedDocument:
    return LockedDocument(
        environments={
            "default": {
                "linux-64": (pkg_a, pkg_b),
                "osx-arm64": (pkg_b,),
            },
            "test": {"linux-64": (pkg_b, pkg_a)},
        }
    )


@pytest.fixture
def pypi_document(pkg_a, pypi_pkg) -> LockedDocument:
    return LockedDocument(
        environments={"default": {"linux-64": (pypi_pkg, pkg_a)}}
    )


@pytest.fixture
def pixi_project(tmp_path) -> Path:
    """A project directory holding a real pixi.lock

    `default` locks conda `a`, pypi `requests` and conda `b` for linux-64,
    `conda-only` locks just the two conda packages.
    """
    shutil.copy(DATA_DIR / "pixi.lock", tmp_path / "pixi.lock")
    return tmp_path
