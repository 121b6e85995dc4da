from app.core.config import Settings
from app.core.logger import logger
from app.core.security import create_access_token
from app.core.session import SessionContext
from app.schemas.shop import LoginResponse
from app.services.directory_service import MasterDirectoryClient


def login_shop(
    context: SessionContext,
    directory: MasterDirectoryClient,
    settings: Settings,
    shop_id: str,
    password: str,
) -> LoginResponse:
    # a logout while the lookup is outstanding bumps the generation,
    # and context.login then discards the late result
    generation = context.begin_login()
    try:
        params = directory.authenticate(shop_id, password)
        expires_at = context.login(params, generation=generation)
    finally:
        context.end_login()

    token = create_access_token(
        {
            "sub": shop_id,
            "domain": "shop",
            "project_id": params.project_id,
            "shop_name": params.shop_name,
        },
        expires_at_ms=expires_at,
        settings=settings,
    )

    logger.info(f"LOGIN SUCCESS | shop_id={shop_id} | project_id={params.project_id}")

    return LoginResponse(
        access_token=token,
        shop_name=params.shop_name,
        expires_at=expires_at,
    )


def logout_shop(context: SessionContext) -> None:
    context.logout()
