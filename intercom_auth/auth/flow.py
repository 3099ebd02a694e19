"""Authorization-code flow controller composed over Authlib."""
from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Protocol, Union

from authlib.integrations.starlette_client import OAuth
from starlette.requests import Request

from .errors import ProfileFetchError
from .profile import NormalizedProfile

logger = logging.getLogger(__name__)


class ProfileFetcher(Protocol):
    """Anything that turns an access token into a normalized profile."""

    name: str

    async def fetch_profile(self, access_token: str) -> NormalizedProfile: ...


class OAuthStrategy(ProfileFetcher, Protocol):
    """A profile fetcher that also knows how to configure the OAuth2 client."""

    callback_url: Optional[str]

    def registration_kwargs(self) -> dict[str, Any]: ...


Verify = Callable[[str, Optional[str], NormalizedProfile], Union[Any, Awaitable[Any]]]


class OAuthFlow:
    """Drive the authorization-code grant and hand the profile to ``verify``.

    The redirect, code exchange and state handling are Authlib's; this class
    only wires the strategy's endpoints into it and calls the strategy's
    :meth:`fetch_profile` once a token has been obtained.
    """

    def __init__(self, strategy: OAuthStrategy, verify: Verify, oauth: OAuth | None = None) -> None:
        self.strategy = strategy
        self.verify = verify
        self.oauth = oauth or OAuth()
        self.oauth.register(**strategy.registration_kwargs())

    @property
    def client(self) -> Any:
        return self.oauth.create_client(self.strategy.name)

    async def authorize_redirect(self, request: Request, redirect_uri: str | None = None) -> Any:
        """Redirect the user agent to the provider's authorization page."""

        redirect_uri = redirect_uri or self.strategy.callback_url
        logger.debug("Starting %s authorization redirect to %s", self.strategy.name, redirect_uri)
        return await self.client.authorize_redirect(request, redirect_uri)

    async def complete(self, request: Request) -> Any:
        """Exchange the callback code, fetch the profile and run ``verify``."""

        token = await self.client.authorize_access_token(request)
        access_token = token.get("access_token")
        if not access_token:
            raise ProfileFetchError("token response did not include an access token")

        profile = await self.strategy.fetch_profile(access_token)
        logger.info("Fetched %s profile id=%s", profile.provider, profile.id)

        result = self.verify(access_token, token.get("refresh_token"), profile)
        if inspect.isawaitable(result):
            result = await result
        return result
