from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.rates import MetalRatesIn, MetalRatesOut, MetalRatesPatch
from app.services import rate_service

router = APIRouter(prefix="/rates", tags=["Metal Rates"])


@router.get("", response_model=Optional[MetalRatesOut])
def get_rates(tenant_db: Session = Depends(get_tenant_db)):
    return rate_service.get_rates(tenant_db)


@router.post("", response_model=MetalRatesOut, status_code=201)
def create_rates(body: MetalRatesIn, tenant_db: Session = Depends(get_tenant_db)):
    return rate_service.add_rates(tenant_db, body)


@router.put("", response_model=MetalRatesOut)
def update_rates(body: MetalRatesPatch, tenant_db: Session = Depends(get_tenant_db)):
    return rate_service.update_rates(tenant_db, body)


@router.delete("")
def delete_rates(tenant_db: Session = Depends(get_tenant_db)):
    return {"deleted": rate_service.delete_rates(tenant_db)}
