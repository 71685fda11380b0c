"""httpx-backed transport that signs every request."""
from __future__ import annotations

from typing import IO

import httpx

from maasclient.auth.oauth1 import Credential, OAuth1Auth, OAuth1Signer, build_auth_header
from maasclient.auth.refresher import REFRESH_INTERVAL, HeaderRefresher, RefreshingAuth
from maasclient.errors import MAASConfigError
from maasclient.params import Params
from maasclient.transport.base import Transport
from maasclient.transport.envelope import Envelope
from maasclient.utils.logging import logger

ACCEPT = "application/json; charset=utf-8"
FORM_URLENCODED = "application/x-www-form-urlencoded"
OCTET_STREAM = "application/octet-stream"


class HttpxSyncTransport(Transport):
    """
    Dispatches signed requests against ``base_url`` (``<endpoint>/api/2.0``).

    :param base_url: API root every path is appended to.
    :param api_key: ``"<consumer key>:<token key>:<token secret>"``.
    :param timeout: Seconds before httpx aborts a call; applied to every request,
        including those sent through a supplied ``client``.
    :param client: Pre-built ``httpx.Client`` (custom TLS, proxies, mocks).
    :param signer: Signer to use instead of one derived from ``api_key``.
    :param refresh_interval: Seconds between header refreshes on multipart posts.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 30.0,
        client: httpx.Client | None = None,
        signer: OAuth1Signer | None = None,
        refresh_interval: float = REFRESH_INTERVAL,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)
        self._timeout = timeout
        self._signer = signer
        if self._signer is None:
            try:
                self._signer = OAuth1Signer(Credential.parse(api_key))
            except MAASConfigError:
                self._signer = None
        self._refresh_interval = refresh_interval

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def auth_header(self, method: str, url: str, params: Params | None) -> str:
        signing = params.first() if params is not None else {}
        if self._signer is not None:
            return self._signer.header(method, url, signing)
        return build_auth_header(method, url, signing, self._api_key)

    def _build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        return self._client.build_request(method, url, timeout=self._timeout, **kwargs)

    def _auth(self, params: Params | None) -> OAuth1Auth:
        return OAuth1Auth(lambda method, url: self.auth_header(method, url, params))

    def _dispatch(self, request: httpx.Request, auth: httpx.Auth) -> Envelope:
        logger.debug(f"{request.method} {request.url}")
        response = self._client.send(request, auth=auth)
        try:
            body = response.read()
        finally:
            response.close()
        if response.status_code >= 300:
            logger.warning(f"{request.method} {request.url.path} -> {response.status_code}")
        return Envelope(status_code=response.status_code, body=body)

    def get(self, path: str, params: Params | None = None) -> Envelope:
        request = self._build_request(
            "GET",
            self.url(path),
            params=params.items() if params else None,
            headers={"Accept": ACCEPT, "Content-Type": FORM_URLENCODED},
        )
        return self._dispatch(request, self._auth(params))

    def post(self, path: str, params: Params | None = None) -> Envelope:
        request = self._build_request(
            "POST",
            self.url(path),
            content=params.encode() if params else b"",
            headers={"Accept": ACCEPT, "Content-Type": FORM_URLENCODED},
        )
        return self._dispatch(request, self._auth(params))

    def post_form(self, path: str, content_type: str, params: Params | None, body: bytes | IO[bytes]) -> Envelope:
        url = self.url(path)
        request = self._build_request(
            "POST",
            url,
            content=body,
            headers={"Accept": ACCEPT, "Content-Type": content_type},
        )
        # Multipart posts can outlive the signature's timestamp window.
        with HeaderRefresher(lambda: self.auth_header("POST", url, params), self._refresh_interval) as refresher:
            return self._dispatch(request, RefreshingAuth(refresher))

    def put(self, path: str, params: Params | None, body: bytes, content_length: int) -> Envelope:
        request = self._build_request(
            "PUT",
            self.url(path),
            content=body,
            headers={
                "Accept": ACCEPT,
                "Content-Type": OCTET_STREAM,
                "Content-Length": str(content_length),
            },
        )
        return self._dispatch(request, self._auth(params))

    def put_params(self, path: str, params: Params | None = None) -> Envelope:
        request = self._build_request(
            "PUT",
            self.url(path),
            content=params.encode() if params else b"",
            headers={"Accept": ACCEPT, "Content-Type": FORM_URLENCODED},
        )
        return self._dispatch(request, self._auth(params))

    def delete(self, path: str, params: Params | None = None) -> Envelope:
        request = self._build_request(
            "DELETE",
            self.url(path),
            content=params.encode() if params else None,
            headers={"Accept": ACCEPT},
        )
        return self._dispatch(request, self._auth(params))

    def close(self) -> None:
        self._client.close()
