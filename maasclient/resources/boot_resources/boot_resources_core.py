from maasclient.models.boot_resource import BootResource

NAME_KEY = "name"
ARCHITECTURE_KEY = "architecture"
SHA256_KEY = "sha256"
SIZE_KEY = "size"
TITLE_KEY = "title"
FILE_TYPE_KEY = "filetype"
BASE_IMAGE_KEY = "base_image"


class _BootResourcesCore:
    ENDPOINT = "/boot-resources/"
    BOOT_RESOURCE_PATH = "/boot-resources/{id}/"

    @classmethod
    def boot_resource_path(cls, id: int) -> str:
        return cls.BOOT_RESOURCE_PATH.format(id=id)

    def parse_one(self, envelope) -> BootResource:
        return self._decode(envelope, BootResource)

    def parse_many(self, envelope) -> list[BootResource]:
        return self._decode(envelope, BootResource, many=True)
