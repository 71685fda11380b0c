"""/boot-resources/ endpoints: custom image registration and upload."""
from __future__ import annotations

from pathlib import Path

from urllib3 import encode_multipart_formdata

from maasclient.models.boot_resource import BootResource
from maasclient.params import Params
from maasclient.resources.base import BaseResource, Builder
from maasclient.resources.boot_resources.boot_resources_core import (
    ARCHITECTURE_KEY,
    BASE_IMAGE_KEY,
    FILE_TYPE_KEY,
    NAME_KEY,
    SHA256_KEY,
    SIZE_KEY,
    TITLE_KEY,
    _BootResourcesCore,
)
from maasclient.utils.files import CHUNK_SIZE, iter_chunks
from maasclient.utils.logging import logger


class BootResources(BaseResource, _BootResourcesCore):
    """
    Resources to register and upload custom boot images.

    Example usage::

        with maasclient.Client() as client:
            builder = client.boot_resources.builder("custom/img", "amd64/generic", sha256, "img.tar.gz", size)
            resource = builder.with_title("Custom image").with_file_type("tgz").create()
            client.boot_resources.boot_resource(resource.id).upload("img.tar.gz", resource)
    """

    def list(self, params: Params | None = None) -> list[BootResource]:
        self.params.reset()
        if params is not None:
            self.params.copy(params)
        return self.parse_many(self._t.get(self.api_path, self.params))

    def boot_resource(self, id: int) -> BootResourceHandle:
        return BootResourceHandle(self._t, id)

    def builder(self, name: str, architecture: str, sha256: str, file_path: str | Path, size: int) -> BootResourceBuilder:
        """
        Start registering a new image.

        :param name: Image name, e.g. ``custom/ubuntu-gpu``.
        :param architecture: ``<arch>/<subarch>``, e.g. ``amd64/generic``.
        :param sha256: Hex digest of the file to upload.
        :param file_path: Local file that ``BootResourceHandle.upload`` will stream.
        :param size: File size in bytes.
        """
        return BootResourceBuilder(self, name, architecture, sha256, file_path, size)


class BootResourceBuilder(Builder):
    def __init__(self, owner: BootResources, name: str, architecture: str, sha256: str, file_path: str | Path, size: int):
        super().__init__(owner)
        self.params.set(NAME_KEY, name)
        self.params.set(ARCHITECTURE_KEY, architecture)
        self.params.set(SHA256_KEY, sha256)
        self.params.set(SIZE_KEY, str(size))
        self.file_path = Path(file_path)

    def with_title(self, title: str) -> BootResourceBuilder:
        self.params.set(TITLE_KEY, title)
        return self

    def with_file_type(self, file_type: str) -> BootResourceBuilder:
        self.params.set(FILE_TYPE_KEY, file_type)
        return self

    def with_base_image(self, base_image: str) -> BootResourceBuilder:
        self.params.set(BASE_IMAGE_KEY, base_image)
        return self

    def create(self) -> BootResource:
        """Register the image; the returned resource carries the upload set."""
        body, content_type = encode_multipart_formdata(self.params.items())
        envelope = self._owner._t.post_form(self._owner.api_path, content_type, self.params, body)
        resource = self._owner.parse_one(envelope)
        logger.debug(f"Created boot resource {resource.id} ({resource.name}) for {self.file_path}")
        return resource

    def upload(self, resource: BootResource) -> None:
        """Stream the builder's file into ``resource``, as returned by ``create``."""
        self._owner.boot_resource(resource.id).upload(self.file_path, resource)


class BootResourceHandle(BaseResource, _BootResourcesCore):
    def __init__(self, transport, id: int):
        super().__init__(transport, self.boot_resource_path(id))
        self.id = id

    def get(self) -> BootResource:
        return self.parse_one(self._t.get(self.api_path, Params()))

    def delete(self) -> None:
        self._decode(self._t.delete(self.api_path))

    def upload(self, file_path: str | Path, resource: BootResource | None = None) -> None:
        """
        Stream ``file_path`` into the latest set of this boot resource.

        The file goes up in 4 MiB PUTs; the last one carries only the bytes
        left. ``resource`` avoids a GET when the caller already holds a fresh
        snapshot (e.g. from ``BootResourceBuilder.create``).

        :raises MAASError: the resource has no set, or its latest set does not hold exactly one file.
        """
        resource = resource or self.get()
        uri = resource.latest_set().upload_uri()

        uploaded = 0
        with open(file_path, "rb") as f:
            for chunk in iter_chunks(f, CHUNK_SIZE):
                self._upload_chunk(uri, chunk)
                uploaded += len(chunk)
                logger.debug(f"Uploaded {uploaded} bytes of {file_path} to {uri}")

    def _upload_chunk(self, uri: str, chunk: bytes) -> None:
        self._decode(self._t.put(uri, Params(), chunk, len(chunk)))
