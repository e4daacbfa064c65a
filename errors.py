class RelayError(Exception):
    """Base class for errors raised by the relay itself."""


class ConfigError(RelayError):
    """Required configuration is missing or invalid."""


class TransportError(RelayError):
    """The backend could not be reached, or its reply could not be decoded."""


class BackendError(RelayError):
    """The backend answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Backend returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body
