from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pixi2ces._src.models.package import LockedPackage


class LockedDocument(BaseModel):
    """The parts of a pixi lockfile needed to render explicit specs

    Maps environment name -> platform -> packages, in the order the
    lockfile lists them.
    """
    model_config = ConfigDict(frozen=True)

    environments: Dict[str, Dict[str, Tuple[LockedPackage, ...]]] = Field(default={})
