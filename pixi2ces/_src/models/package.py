from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from typing_extensions import Annotated


Md5Hex = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{32}$")]
Sha256Hex = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{64}$")]


class CondaPackage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["conda"] = "conda"
    name: str
    version: str
    build: str = ""
    subdir: str = ""
    # full url of the archive, eg. 'https://conda.anaconda.org/conda-forge/linux-64/zlib-1.3.1-hb9d3cd8_2.conda'
    url: str
    md5: Optional[Md5Hex] = None
    sha256: Optional[Sha256Hex] = None

    @field_validator("md5", "sha256", mode="before")
    @classmethod
    def _hex_digest(cls, value):
        """Digests come out of rattler as raw bytes, store them as lowercase hex"""
        if isinstance(value, (bytes, bytearray)):
            return value.hex()
        if isinstance(value, str):
            return value.lower()
        return value

    def __str__(self):
        return f"conda: {self.name} - {self.version}"


class PypiPackage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["pypi"] = "pypi"
    name: str
    version: str
    url: Optional[str] = None

    def __str__(self):
        return f"pypi: {self.name} - {self.version}"


LockedPackage = Annotated[Union[CondaPackage, PypiPackage], Field(discriminator="kind")]
