from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from playlist_viewer.config import load_public_login_config
from playlist_viewer.spotify import build_authorize_url, exchange_authorization_code

from .schemas import CallbackRequest

router = APIRouter()


@router.get("/login")
def login_redirect() -> RedirectResponse:
    """
    Send the browser to Spotify's authorize page.
    """
    client_id, redirect_uri = load_public_login_config()
    return RedirectResponse(build_authorize_url(client_id, redirect_uri))


@router.post("/callback")
def auth_callback(body: CallbackRequest) -> dict:
    """
    Exchange the authorization code from the login redirect for tokens.

    Spotify's token response (access_token, refresh_token, expires_in, ...)
    is returned unchanged.
    """
    return exchange_authorization_code(body.code)
