from .base import Transport
from .envelope import Envelope, decode
from .httpx_sync import HttpxSyncTransport

__all__ = ["Transport", "Envelope", "decode", "HttpxSyncTransport"]
