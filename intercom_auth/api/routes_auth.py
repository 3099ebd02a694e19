"""Authentication endpoints for the Intercom OAuth flow."""
from __future__ import annotations

import logging
from typing import Any

import httpx
from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from ..auth import ProfileError, get_intercom_flow
from ..auth.strategy import PROVIDER_NAME
from ..core.config import settings
from ..core.metrics import record_login_callback

router = APIRouter()

logger = logging.getLogger(__name__)


def _frontend_redirect(path: str) -> RedirectResponse:
    return RedirectResponse(
        url=f"{settings.FRONTEND_URL.rstrip('/')}{path}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/intercom/login", summary="Initiate Intercom login")
async def intercom_login(request: Request) -> Any:
    """Redirect the user to Intercom for authorization."""

    flow = get_intercom_flow()
    redirect_uri = settings.INTERCOM_CALLBACK_URL or str(request.url_for("intercom_callback"))
    return await flow.authorize_redirect(request, redirect_uri)


@router.get("/intercom/callback", summary="Intercom redirect URI", name="intercom_callback")
async def intercom_callback(request: Request) -> RedirectResponse:
    """Process the authorization code callback and establish a session."""

    flow = get_intercom_flow()

    try:
        profile = await flow.complete(request)
    except OAuthError as exc:
        record_login_callback(PROVIDER_NAME, "oauth_error")
        logger.warning("Intercom authorization failed: %s", exc)
        return _frontend_redirect("/login?error=oauth")
    except httpx.HTTPError as exc:
        record_login_callback(PROVIDER_NAME, "exchange_error")
        logger.warning("Intercom token exchange failed: %s", exc)
        return _frontend_redirect("/login?error=oauth")
    except ProfileError as exc:
        record_login_callback(PROVIDER_NAME, "profile_error")
        logger.error("Intercom profile retrieval failed: %s", exc)
        return _frontend_redirect("/login?error=profile")

    record_login_callback(PROVIDER_NAME, "success")
    request.session.clear()
    request.session["profile"] = {"provider": profile.provider, "id": profile.id}

    return _frontend_redirect("/callback")


@router.get("/me", summary="Current user profile")
async def read_current_user(request: Request) -> dict[str, Any]:
    """Return the profile stored in the session by the callback."""

    profile = request.session.get("profile")
    if not profile:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return {"user": profile}


@router.post("/logout", summary="Terminate the current session")
async def logout(request: Request) -> JSONResponse:
    """Clear the session cookie for the authenticated user."""

    request.session.clear()
    response = JSONResponse({"detail": "Logged out"})
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        path="/",
        secure=settings.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )
    return response
