"""Intercom OAuth 2.0 login strategy."""
from .auth import IntercomStrategy, NormalizedProfile, ProfileDecodeError, ProfileFetchError

__all__ = ["IntercomStrategy", "NormalizedProfile", "ProfileDecodeError", "ProfileFetchError"]
