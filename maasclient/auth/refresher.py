"""Keeps the Authorization header fresh while a long request is being prepared and sent."""
from __future__ import annotations

import threading
import time
from typing import Callable, Generator

import httpx

from maasclient.utils.logging import logger

# MAAS rejects OAuth timestamps older than 300 seconds.
REFRESH_INTERVAL = 2 * 60


class HeaderRefresher:
    """
    Owns the header slot of one in-flight request.

    A background thread re-signs every ``interval`` seconds until the
    context exits. Writers and the reader (``RefreshingAuth``) go through
    the same lock, so the request carries the last header set before send.

    Example usage::

        with HeaderRefresher(lambda: signer.header("POST", url, params)) as refresher:
            client.send(request, auth=RefreshingAuth(refresher))
    """

    def __init__(self, sign: Callable[[], str], interval: float = REFRESH_INTERVAL):
        self._sign = sign
        self._interval = interval
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._header = ""
        self.refresh_count = 0

    @property
    def header(self) -> str:
        with self._lock:
            return self._header

    def refresh(self) -> str:
        header = self._sign()
        with self._lock:
            self._header = header
            self.refresh_count += 1
        return header

    def start(self) -> None:
        self.refresh()
        self._thread = threading.Thread(target=self._run, name="maasclient-auth-refresher", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            logger.debug(f"refreshing auth token at {time.strftime('%Y-%m-%dT%H:%M:%S%z')}")
            self.refresh()

    def __enter__(self) -> HeaderRefresher:
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()


class RefreshingAuth(httpx.Auth):
    """Applies the refresher's current header at send time."""

    def __init__(self, refresher: HeaderRefresher):
        self._refresher = refresher

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        header = self._refresher.header
        if header:
            request.headers["Authorization"] = header
        yield request
