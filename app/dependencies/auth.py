from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from app.core.auth_context import get_current_token
from app.core.config import Settings
from app.core.errors import NotAuthenticated
from app.core.security import decode_access_token
from app.core.session import SessionContext
from app.services.directory_service import MasterDirectoryClient


@dataclass
class ShopPrincipal:
    project_id: str
    shop_name: Optional[str]
    domain: str              # always "shop" for console tokens


# =====================================================
# COMPONENTS (built once in create_app)
# =====================================================

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_context(request: Request) -> SessionContext:
    return request.app.state.session_context


def get_directory(request: Request) -> MasterDirectoryClient:
    return request.app.state.directory


# =====================================================
# TOKEN → PRINCIPAL
# =====================================================

def get_current_session(
    token: str = Depends(get_current_token),
    settings: Settings = Depends(get_settings),
) -> ShopPrincipal:
    payload = decode_access_token(token, settings)

    if not payload.get("project_id"):
        raise NotAuthenticated("Invalid or expired token")

    return ShopPrincipal(
        project_id=payload["project_id"],
        shop_name=payload.get("shop_name"),
        domain=payload.get("domain", ""),
    )


def require_shop(
    principal: ShopPrincipal = Depends(get_current_session),
    context: SessionContext = Depends(get_session_context),
) -> ShopPrincipal:
    if principal.domain != "shop":
        raise NotAuthenticated("Shop access required")

    params = context.params
    if params is None or params.project_id != principal.project_id:
        raise NotAuthenticated("Session is no longer active")

    return principal
