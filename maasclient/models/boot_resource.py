from pydantic import Field

from maasclient.errors import MAASError
from maasclient.models.base import MAASModel

UPLOAD_URI_PREFIX = "/MAAS/api/2.0"


class BootResourceSetFile(MAASModel):
    filename: str = ""
    filetype: str = ""
    sha256: str = ""
    size: int = 0
    complete: bool = False
    progress: float = 0
    upload_uri: str = ""


class BootResourceSet(MAASModel):
    version: str = ""
    label: str = ""
    size: int = 0
    complete: bool = False
    progress: float = 0
    files: dict[str, BootResourceSetFile] = {}

    def upload_uri(self) -> str:
        """Upload path of the set's only file, relative to the API root."""
        if len(self.files) != 1:
            raise MAASError(f"expected exactly one file in set {self.version!r}, found {len(self.files)}")
        (file,) = self.files.values()
        return file.upload_uri.removeprefix(UPLOAD_URI_PREFIX)


class BootResource(MAASModel):
    id: int = 0
    type: str = ""
    name: str = ""
    architecture: str = ""
    subarches: str = ""
    title: str = ""
    sets: dict[str, BootResourceSet] = Field(default_factory=dict)

    def latest_set(self) -> BootResourceSet:
        """The set under the lexicographically smallest key.

        Keys are version strings such as ``20240101-0``; the smallest one is
        picked, which is not necessarily the most recent upload.
        """
        if not self.sets:
            raise MAASError("no set found in boot resource")
        return self.sets[sorted(self.sets)[0]]
