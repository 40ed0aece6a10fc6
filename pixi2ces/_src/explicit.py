import logging
from pathlib import Path

from pixi2ces._src.constants import EXPLICIT_MARKER, GENERATED_BY
from pixi2ces._src.exceptions import NoPlatform, OutputWriteFailed
from pixi2ces._src.models.explicit import ExplicitSpec


logger = logging.getLogger(__name__)


def render_explicit_spec(spec: ExplicitSpec) -> str:
    """Render `spec` in the conda explicit format

    The file looks like::

        # Generated by pixi :: pixi2ces
        # platform: linux-64
        @EXPLICIT
        https://conda.anaconda.org/conda-forge/linux-64/zlib-1.3.1-hb9d3cd8_2.conda#<md5>
    """
    if spec.platform is None:
        raise NoPlatform("serialize")

    lines = [
        f"# Generated by {GENERATED_BY}",
        f"# platform: {spec.platform}",
        EXPLICIT_MARKER,
    ]
    lines.extend(entry.url for entry in spec.packages)
    return "".join(f"{line}\n" for line in lines)


def write_explicit_spec(target: str | Path, spec: ExplicitSpec) -> None:
    """Overwrite `target` with the rendered spec.

    The write is not atomic, an interrupted run can leave a truncated file.
    """
    environment = render_explicit_spec(spec)
    logger.debug("Writing %d packages to %s", len(spec.packages), target)
    try:
        Path(target).write_text(environment, encoding="utf-8", newline="\n")
    except OSError as err:
        raise OutputWriteFailed(target, err) from err
