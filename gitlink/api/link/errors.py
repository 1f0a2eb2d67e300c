"""Exceptions raised by link construction."""


class LinkError(Exception):
    """Base class for link construction errors."""


class UnknownRemoteHostError(LinkError):
    """The remote URL does not belong to a supported hosting provider."""

    def __init__(self, remote_url: str = ""):
        message = f"Unknown remote Git host: {remote_url!r}" if remote_url else "Unknown remote Git host"
        super().__init__(message)
        self.remote_url = remote_url
