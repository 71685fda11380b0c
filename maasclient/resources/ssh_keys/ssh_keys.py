from maasclient.models.ssh_key import SSHKey
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class SSHKeys(BaseResource):
    """Public keys of the account that owns the API key."""

    ENDPOINT = "/account/prefs/sshkeys/"

    def list(self) -> list[SSHKey]:
        return self._decode(self._t.get(self.api_path, Params()), SSHKey, many=True)
