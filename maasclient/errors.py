"""Exceptions raised by the MAAS client."""


class MAASError(Exception):
    pass


class MAASConfigError(MAASError):
    """Raised before any network call when the client or a request is misconfigured."""


class MAASHTTPError(MAASError):
    """The API answered with a status outside of 200/201/202/204.

    ``body`` is the raw response text; it is never parsed.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"status: {status_code}, message: {body}")


class MAASDecodeError(MAASError):
    """An acceptable response whose body does not match the expected shape."""
