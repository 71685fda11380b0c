from maasclient.resources.base import OPERATION, BaseResource
from maasclient.utils.logging import logger

OP_IMPORT_BOOT_IMAGES = "import_boot_images"


class RackControllers(BaseResource):
    ENDPOINT = "/rackcontrollers/"

    def import_boot_images(self) -> None:
        """Ask every rack controller to sync boot images from the region."""
        self.params.reset()
        self.params.set(OPERATION, OP_IMPORT_BOOT_IMAGES)
        logger.info("Importing boot images on rack controllers")
        self._decode(self._t.post(self.api_path, self.params))
