"""Entrypoint for the MAAS client.

Will expose Client, Params, the error hierarchy and __version__
"""

from .client import Client
from .config import Config
from .errors import MAASConfigError, MAASDecodeError, MAASError, MAASHTTPError
from .params import Params
from .version import VERSION as __version__

__all__ = [
    "Client",
    "Config",
    "Params",
    "MAASError",
    "MAASConfigError",
    "MAASHTTPError",
    "MAASDecodeError",
    "__version__",
]
