from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.catalog import CategoryIn, CategoryOut
from app.services import catalog_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryOut])
def get_categories(tenant_db: Session = Depends(get_tenant_db)):
    return catalog_service.list_categories(tenant_db)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(body: CategoryIn, tenant_db: Session = Depends(get_tenant_db)):
    return catalog_service.add_category(tenant_db, body)


@router.put("/{category_id}", response_model=CategoryOut)
def edit_category(
    category_id: str,
    body: CategoryIn,
    tenant_db: Session = Depends(get_tenant_db),
):
    return catalog_service.update_category(tenant_db, category_id, body)


@router.delete("/{category_id}")
def remove_category(category_id: str, tenant_db: Session = Depends(get_tenant_db)):
    deleted = catalog_service.delete_category(tenant_db, category_id)
    return {"id": category_id, "deleted": deleted}
