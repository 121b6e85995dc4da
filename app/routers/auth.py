from fastapi import APIRouter, Depends, Response

from app.core.auth_context import TOKEN_COOKIE
from app.core.config import Settings
from app.core.session import SessionContext
from app.dependencies.auth import get_directory, get_session_context, get_settings
from app.schemas.shop import LoginRequest, LoginResponse, SessionStatus
from app.services.auth_service import login_shop, logout_shop
from app.services.directory_service import MasterDirectoryClient


router = APIRouter(prefix="/auth", tags=["Shop Auth"])


@router.post("/login", response_model=LoginResponse)
def shop_login(
    body: LoginRequest,
    response: Response,
    context: SessionContext = Depends(get_session_context),
    directory: MasterDirectoryClient = Depends(get_directory),
    settings: Settings = Depends(get_settings),
):
    result = login_shop(context, directory, settings, body.shop_id, body.password)

    # web console keeps the token in a cookie
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=result.access_token,
        max_age=int(settings.SESSION_WINDOW_SECONDS),
        httponly=True,
        samesite="lax",
        secure=settings.ENV != "local"
    )
    return result


@router.post("/logout")
def shop_logout(
    response: Response,
    context: SessionContext = Depends(get_session_context),
):
    logout_shop(context)
    response.delete_cookie(TOKEN_COOKIE)
    # console goes back to the login screen
    return {"status": "logged_out", "redirect": "/"}


@router.get("/session", response_model=SessionStatus)
def session_status(context: SessionContext = Depends(get_session_context)):
    params = context.params
    return SessionStatus(
        authenticated=params is not None,
        shop_name=params.shop_name if params else None,
    )


@router.get("/ping")
def ping():
    return {"status": "ok"}
