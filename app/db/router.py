from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.dependencies.auth import ShopPrincipal, require_shop


def get_tenant_db(
    request: Request,
    principal: ShopPrincipal = Depends(require_shop),
) -> Generator[Session, None, None]:
    """
    Session on the shop database of this process.
    Never resolves on its own: no handle means TenantNotInitialized.
    """
    handle = request.app.state.registry.require_handle()
    tenant_db = handle.session()
    try:
        yield tenant_db
    finally:
        tenant_db.close()
