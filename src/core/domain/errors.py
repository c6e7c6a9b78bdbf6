"""Error kinds surfaced to the user.

Every error ends the invocation with a diagnostic; none is retried.
"""

from __future__ import annotations


class HttpieLiteError(Exception):
    """Base class for every user-visible failure."""


class ParseError(HttpieLiteError):
    """An argument could not be turned into a request component."""


class MalformedPair(ParseError):
    """A body token lacks the `=` separator."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Failed to parse {token}")
        self.token = token


class InvalidUrl(ParseError):
    """The URL is not an absolute URL with scheme and host."""

    def __init__(self, raw: str, reason: str | None = None) -> None:
        message = f"Invalid URL {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.raw = raw
        self.reason = reason


class NetworkError(HttpieLiteError):
    """Connection, DNS or transport-level failure while sending a request."""

    def __init__(self, url: str, cause: str) -> None:
        super().__init__(f"Request to {url} failed: {cause}")
        self.url = url


class BodyFormatError(HttpieLiteError):
    """The body declared `application/json` but is not valid JSON."""
