"""Authentication helpers and clients."""
from __future__ import annotations

from functools import lru_cache

from ..core.config import settings
from .errors import ProfileDecodeError, ProfileError, ProfileFetchError
from .flow import OAuthFlow, ProfileFetcher, Verify
from .profile import NormalizedProfile
from .strategy import IntercomStrategy


def _return_profile(access_token: str, refresh_token: str | None, profile: NormalizedProfile) -> NormalizedProfile:
    return profile


@lru_cache(maxsize=1)
def get_intercom_flow() -> OAuthFlow:
    """Return the Intercom flow configured from application settings."""

    return OAuthFlow(IntercomStrategy.from_settings(settings), verify=_return_profile)


__all__ = [
    "IntercomStrategy",
    "NormalizedProfile",
    "OAuthFlow",
    "ProfileDecodeError",
    "ProfileError",
    "ProfileFetchError",
    "ProfileFetcher",
    "Verify",
    "get_intercom_flow",
]
