"""OAuth 1.0 (HMAC-SHA1) request signing for the MAAS API."""
from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Generator, Mapping
from urllib.parse import quote_plus, urlencode

import httpx

from maasclient.errors import MAASConfigError
from maasclient.utils.logging import logger

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


@dataclass(frozen=True)
class Credential:
    consumer_key: str
    token_key: str
    token_secret: str
    # MAAS API keys never carry a consumer secret.
    consumer_secret: str = ""

    @classmethod
    def parse(cls, api_key: str) -> Credential:
        """Split ``"<consumer key>:<token key>:<token secret>"``."""
        parts = (api_key or "").split(":", 2)
        if len(parts) != 3:
            raise MAASConfigError(
                f"invalid API key {api_key!r}; expected \"<consumer key>:<token key>:<token secret>\""
            )
        return cls(*parts)


class OAuth1Signer:
    """
    Builds one ``Authorization`` header per request.

    The signer holds no per-request state; ``nonce_factory`` and ``clock``
    exist so tests can pin the two values that change between calls.
    """

    def __init__(
        self,
        credential: Credential,
        nonce_factory: Callable[[], str] | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.credential = credential
        self._nonce_factory = nonce_factory or (lambda: str(uuid.uuid4()))
        self._clock = clock or time.time

    def base_params(self, nonce: str | None = None, timestamp: int | None = None) -> dict[str, str]:
        return {
            "oauth_nonce": nonce if nonce is not None else self._nonce_factory(),
            "oauth_consumer_key": self.credential.consumer_key,
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": str(timestamp if timestamp is not None else int(self._clock())),
            "oauth_token": self.credential.token_key,
            "oauth_version": OAUTH_VERSION,
        }

    def signing_params(
        self,
        method: str,
        params: Mapping[str, str] | None,
        nonce: str | None = None,
        timestamp: int | None = None,
    ) -> dict[str, str]:
        vals = self.base_params(nonce, timestamp)
        # The API rejects PUT signatures that cover the request parameters.
        if method.upper() != "PUT":
            for key, value in (params or {}).items():
                vals.setdefault(key, value)
        return vals

    def signature_base(self, method: str, url: str, vals: Mapping[str, str]) -> str:
        return "&".join([
            method.upper(),
            quote_plus(url.split("?", 1)[0]),
            quote_plus(parameter_string(vals)),
        ])

    def signing_key(self) -> str:
        return f"{quote_plus(self.credential.consumer_secret)}&{quote_plus(self.credential.token_secret)}"

    def header(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None = None,
        nonce: str | None = None,
        timestamp: int | None = None,
    ) -> str:
        vals = self.signing_params(method, params, nonce, timestamp)
        base = self.signature_base(method, url, vals)
        vals["oauth_signature"] = calculate_signature(base, self.signing_key())
        return "OAuth " + ", ".join(f'{key}="{quote_plus(value)}"' for key, value in vals.items())


def parameter_string(vals: Mapping[str, str]) -> str:
    """Sorted, percent-encoded parameters; spaces are ``%20``, never ``+``."""
    return urlencode(sorted(vals.items()), quote_via=quote_plus).replace("+", "%20")


def calculate_signature(base: str, key: str) -> str:
    digest = hmac.new(key.encode(), base.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


def build_auth_header(method: str, url: str, params: Mapping[str, str] | None, api_key: str) -> str:
    """Sign one request, or return ``""`` when ``api_key`` is not a three-part credential."""
    try:
        credential = Credential.parse(api_key)
    except MAASConfigError:
        logger.warning("API key is not in <consumer key>:<token key>:<token secret> form, sending unsigned request")
        return ""
    return OAuth1Signer(credential).header(method, url, params)


class OAuth1Auth(httpx.Auth):
    """Signs the request immediately before httpx sends it."""

    def __init__(self, sign: Callable[[str, str], str]):
        self._sign = sign

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        header = self._sign(request.method, str(request.url))
        if header:
            request.headers["Authorization"] = header
        yield request
