"""Normalized identity profile returned by provider adapters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NormalizedProfile:
    """Provider-agnostic view of an authenticated user.

    Attributes:
        provider: Fixed identifier of the identity provider
        id: Provider-assigned user identifier, copied verbatim (may be None)
        name: Display name as reported by the provider
        email: Email address as reported by the provider
        raw_profile: The decoded response payload, untouched
    """

    provider: str
    id: Any = None
    name: Any = None
    email: Any = None
    raw_profile: dict[str, Any] = field(default_factory=dict, repr=False)

    def as_dict(self) -> dict[str, Any]:
        """Return the normalized fields without the raw payload."""

        return {
            "provider": self.provider,
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }
