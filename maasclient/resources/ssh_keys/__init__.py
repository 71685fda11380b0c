from .ssh_keys import SSHKeys

__all__ = ["SSHKeys"]
