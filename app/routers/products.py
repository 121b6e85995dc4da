from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.catalog import ProductIn, ProductOut
from app.services import catalog_service

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductOut])
def get_products(
    category_id: str = Query(..., min_length=1, description="Category to list"),
    tenant_db: Session = Depends(get_tenant_db),
):
    return catalog_service.list_products(tenant_db, category_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(body: ProductIn, tenant_db: Session = Depends(get_tenant_db)):
    return catalog_service.add_product(tenant_db, body)


@router.put("/{product_id}", response_model=ProductOut)
def edit_product(
    product_id: str,
    body: ProductIn,
    tenant_db: Session = Depends(get_tenant_db),
):
    return catalog_service.update_product(tenant_db, product_id, body)


@router.delete("/{product_id}")
def remove_product(product_id: str, tenant_db: Session = Depends(get_tenant_db)):
    deleted = catalog_service.delete_product(tenant_db, product_id)
    return {"id": product_id, "deleted": deleted}
