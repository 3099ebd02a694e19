"""Errors raised while retrieving a user profile from the provider."""
from __future__ import annotations


class ProfileError(Exception):
    """Base class for profile retrieval failures.

    The wrapped exception is kept on ``error`` and is also chained as
    ``__cause__`` when raised with ``raise ... from``.
    """

    default_message = "failed to retrieve user profile"

    def __init__(self, message: str | None = None, error: BaseException | None = None) -> None:
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.error is None:
            return self.message
        return f"{self.message}: {self.error}"


class ProfileFetchError(ProfileError):
    """The profile request failed at the transport or HTTP level."""

    default_message = "failed to fetch user profile"

    def __init__(
        self,
        message: str | None = None,
        error: BaseException | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, error)
        self.status_code = status_code


class ProfileDecodeError(ProfileError):
    """The profile response body was not a JSON object."""

    default_message = "failed to parse user profile"
