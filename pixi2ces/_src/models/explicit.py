from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ExplicitEntry(BaseModel):
    """A single package url, pinned by the md5 in its fragment"""
    model_config = ConfigDict(frozen=True)

    url: str


class ExplicitSpec(BaseModel):
    """An explicit environment for exactly one platform

    Packages keep lockfile order, conda installs them in that order.
    """
    model_config = ConfigDict(frozen=True)

    platform: Optional[str] = None
    packages: Tuple[ExplicitEntry, ...] = Field(default=())
