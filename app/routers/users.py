from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.user import UserOut
from app.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserOut])
def get_users(tenant_db: Session = Depends(get_tenant_db)):
    return user_service.list_users(tenant_db)
