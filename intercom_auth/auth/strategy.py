"""Intercom OAuth 2.0 strategy.

The strategy carries the fixed Intercom endpoints used by the delegated
OAuth2 client (Authlib) and turns an access token into a
:class:`NormalizedProfile` by calling Intercom's current-user resource.

Usage:
    strategy = IntercomStrategy(client_id="123-456-789", client_secret="shhh")
    profile = await strategy.fetch_profile(access_token)
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx

from ..core.config import Settings
from ..core.metrics import record_profile_fetch
from .errors import ProfileDecodeError, ProfileError, ProfileFetchError
from .profile import NormalizedProfile

logger = logging.getLogger(__name__)

PROVIDER_NAME = "intercom"

DEFAULT_AUTHORIZATION_URL = "https://app.intercom.io/oauth"
DEFAULT_TOKEN_URL = "https://api.intercom.io/auth/eagle/token"
DEFAULT_PROFILE_URL = "https://api.intercom.io/users"
DEFAULT_TIMEOUT = 10.0

AUTHORIZATION_CODE = "authorization_code"

Done = Callable[[Optional[BaseException], Optional[NormalizedProfile]], Any]


class IntercomStrategy:
    """Authenticate users against Intercom using the authorization-code grant.

    Options that are omitted fall back to Intercom's public endpoints. The
    client id, secret and callback URL are handed to the OAuth2 client
    unchanged.
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        callback_url: str | None = None,
        authorization_url: str | None = None,
        token_url: str | None = None,
        grant_type: str | None = None,
        profile_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        grant_type = grant_type or AUTHORIZATION_CODE
        if grant_type != AUTHORIZATION_CODE:
            raise ValueError(f"Unsupported grant_type {grant_type!r}; only {AUTHORIZATION_CODE!r} is allowed")

        self.client_id = client_id
        self.client_secret = client_secret
        self.callback_url = callback_url
        self.authorization_url = authorization_url or DEFAULT_AUTHORIZATION_URL
        self.token_url = token_url or DEFAULT_TOKEN_URL
        self.grant_type = grant_type
        self.profile_url = profile_url or DEFAULT_PROFILE_URL
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "IntercomStrategy":
        """Build a strategy from application settings."""

        return cls(
            client_id=settings.INTERCOM_CLIENT_ID,
            client_secret=settings.INTERCOM_CLIENT_SECRET,
            callback_url=settings.INTERCOM_CALLBACK_URL,
            authorization_url=settings.INTERCOM_AUTHORIZATION_URL,
            token_url=settings.INTERCOM_TOKEN_URL,
            profile_url=settings.INTERCOM_PROFILE_URL,
            timeout=settings.HTTP_TIMEOUT,
            **kwargs,
        )

    def registration_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for ``authlib`` ``OAuth.register``."""

        client_kwargs: dict[str, Any] = {"token_endpoint_auth_method": "client_secret_post"}
        if self._transport is not None:
            client_kwargs["transport"] = self._transport
        return {
            "name": self.name,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "authorize_url": self.authorization_url,
            "access_token_url": self.token_url,
            "access_token_params": {"grant_type": self.grant_type},
            "client_kwargs": client_kwargs,
        }

    async def fetch_profile(self, access_token: str) -> NormalizedProfile:
        """Retrieve the current user from Intercom.

        Args:
            access_token: Bearer token obtained by the OAuth2 client

        Returns:
            A freshly built profile with ``provider`` set to ``"intercom"``

        Raises:
            ProfileFetchError: On connection errors or a non-success status
            ProfileDecodeError: If the body is not a JSON object
        """

        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.profile_url, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            record_profile_fetch(self.name, "fetch_error")
            logger.warning(
                "Intercom profile request returned status %s", exc.response.status_code
            )
            raise ProfileFetchError(error=exc, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            record_profile_fetch(self.name, "fetch_error")
            logger.warning("Intercom profile request failed: %s", exc)
            raise ProfileFetchError(error=exc) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            record_profile_fetch(self.name, "decode_error")
            logger.warning("Intercom profile response is not valid JSON: %s", exc)
            raise ProfileDecodeError(error=exc) from exc

        if not isinstance(payload, dict):
            record_profile_fetch(self.name, "decode_error")
            error = TypeError(f"expected a JSON object, got {type(payload).__name__}")
            logger.warning("Intercom profile response is not a JSON object: %s", error)
            raise ProfileDecodeError(error=error) from error

        record_profile_fetch(self.name, "success")
        return self.parse_profile(payload)

    def parse_profile(self, payload: dict[str, Any]) -> NormalizedProfile:
        """Map an Intercom user payload onto a normalized profile."""

        return NormalizedProfile(
            provider=self.name,
            id=payload.get("user_id"),
            name=payload.get("name"),
            email=payload.get("email"),
            raw_profile=payload,
        )

    async def user_profile(self, access_token: str, done: Done) -> None:
        """Callback-style wrapper around :meth:`fetch_profile`.

        ``done`` is called exactly once, with ``(None, profile)`` on success or
        ``(error, None)`` on failure.
        """

        try:
            profile = await self.fetch_profile(access_token)
        except ProfileError as exc:
            done(exc, None)
            return
        done(None, profile)
