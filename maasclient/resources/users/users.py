from maasclient.models.user import User
from maasclient.resources.base import OPERATION, BaseResource

OP_WHOAMI = "whoami"


class Users(BaseResource):
    ENDPOINT = "/users/"

    def list(self) -> list[User]:
        self.params.reset()
        return self._decode(self._t.get(self.api_path, self.params), User, many=True)

    def whoami(self) -> User:
        """The user the API key belongs to."""
        self.params.reset()
        self.params.set(OPERATION, OP_WHOAMI)
        return self._decode(self._t.get(self.api_path, self.params), User)
