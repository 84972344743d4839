"""Custom exception hierarchy for ridesharing.

Validation failures are never raised; they are returned as violation lists
by :mod:`ridesharing.validators`.  These exceptions only cover the
collaborator boundary (configuration and the HTTP auth endpoint).
"""

from __future__ import annotations


class RideshareError(Exception):
    """Base exception for all ridesharing errors."""


class RideshareConfigError(RideshareError):
    """Invalid or missing configuration."""


class RideshareTransportError(RideshareError):
    """HTTP-level failure (network, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RideshareApiError(RideshareError):
    """The API answered, but not with the expected result."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RideshareAuthenticationError(RideshareApiError):
    """The auth endpoint rejected the session (any non-200 answer).

    Callers at the boundary are expected to clear the session user and
    send the user to the login view.
    """
