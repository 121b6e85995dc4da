from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.partner import EarningEntry, PartnerOut
from app.services import partner_service

router = APIRouter(prefix="/partners", tags=["Partner Earnings"])


@router.get("/{mobile}", response_model=PartnerOut)
def get_partner(mobile: str, tenant_db: Session = Depends(get_tenant_db)):
    return partner_service.get_partner(tenant_db, mobile)


@router.post("/{mobile}/earnings", response_model=PartnerOut)
def add_earning(
    mobile: str,
    body: EarningEntry,
    tenant_db: Session = Depends(get_tenant_db),
):
    return partner_service.add_earning(tenant_db, mobile, body)
