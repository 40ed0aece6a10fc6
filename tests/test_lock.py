import pytest

from pixi2ces._src.exceptions import LockfileUnreadable
from pixi2ces._src import lock
from pixi2ces._src.lock import read_lockfile
from pixi2ces._src.models.package import CondaPackage, PypiPackage


def test_read_lockfile(pixi_project) -> None:
    document = read_lockfile(pixi_project / "pixi.lock")

    assert set(document.environments) == {"default", "conda-only"}
    assert set(document.environments["default"]) == {"linux-64"}

    packages = document.environments["default"]["linux-64"]
    conda = [pkg for pkg in packages if isinstance(pkg, CondaPackage)]
    pypi = [pkg for pkg in packages if isinstance(pkg, PypiPackage)]
    assert len(packages) == 3

    assert [pkg.name for pkg in conda] == ["a", "b"]
    assert [pkg.url for pkg in conda] == [
        "https://repo/a-1.0-0.conda",
        "https://repo/b-2.0-0.conda",
    ]
    assert [pkg.md5 for pkg in conda] == [
        "d41d8cd98f00b204e9800998ecf8427e",
        "e4d909c290d0fb1ca068ffaddf22cbd0",
    ]
    assert conda[1].version == "2.0"
    assert conda[1].build == "0"

    assert [pkg.name for pkg in pypi] == ["requests"]
    assert pypi[0].version == "2.32.3"
    assert pypi[0].url.endswith("requests-2.32.3-py3-none-any.whl")


def test_read_lockfile_conda_only_environment(pixi_project) -> None:
    document = read_lockfile(pixi_project / "pixi.lock")

    packages = document.environments["conda-only"]["linux-64"]

    assert all(isinstance(pkg, CondaPackage) for pkg in packages)
    assert [pkg.name for pkg in packages] == ["a", "b"]


def test_read_missing_lockfile(tmp_path) -> None:
    path = tmp_path / "pixi.lock"

    with pytest.raises(LockfileUnreadable) as exc_info:
        read_lockfile(path)

    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)


def test_read_unparseable_lockfile(tmp_path) -> None:
    path = tmp_path / "pixi.lock"
    path.write_text("this is: [not a lockfile\n")

    with pytest.raises(LockfileUnreadable) as exc_info:
        read_lockfile(path)

    assert exc_info.value.__cause__ is not None


def test_read_lockfile_does_not_hide_programming_errors(tmp_path, monkeypatch) -> None:
    path = tmp_path / "pixi.lock"
    path.write_text("version: 6\n")

    def broken_from_path(path):
        raise TypeError("from_path() got an unexpected argument")

    monkeypatch.setattr(lock.LockFile, "from_path", staticmethod(broken_from_path))

    with pytest.raises(TypeError):
        read_lockfile(path)
