"""Failures that abort an outage ETL run."""


class OutageEtlError(Exception):
    pass


class ConfigurationError(OutageEtlError):
    """Invalid ETL configuration, raised before any network call."""


class TransportError(OutageEtlError):
    """Upstream or sink HTTP failure."""

    def __init__(self, status_code: int | None, reason: str, url: str | None = None, action: str = "fetch data"):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        if status_code is None:
            message = f"Failed to {action}: {reason}"
        else:
            message = f"Failed to {action}: {status_code} {reason}"
        super().__init__(message)


class ParseError(OutageEtlError):
    """Response body is not JSON or does not match the outage report shape."""
