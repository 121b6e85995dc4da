from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.router import get_tenant_db
from app.schemas.investment import (
    InvestmentOut,
    InvestmentPlanIn,
    InvestmentPlanOut,
    PaymentEntry,
)
from app.services import investment_service

plans_router = APIRouter(prefix="/investment-plans", tags=["Investment Plans"])
router = APIRouter(prefix="/investments", tags=["Investments"])


# =====================================================
# PLANS
# =====================================================

@plans_router.get("", response_model=List[InvestmentPlanOut])
def get_plans(tenant_db: Session = Depends(get_tenant_db)):
    return investment_service.list_plans(tenant_db)


@plans_router.post("", response_model=InvestmentPlanOut, status_code=201)
def create_plan(body: InvestmentPlanIn, tenant_db: Session = Depends(get_tenant_db)):
    return investment_service.add_plan(tenant_db, body)


@plans_router.put("/{plan_id}", response_model=InvestmentPlanOut)
def edit_plan(
    plan_id: str,
    body: InvestmentPlanIn,
    tenant_db: Session = Depends(get_tenant_db),
):
    return investment_service.update_plan(tenant_db, plan_id, body)


@plans_router.delete("/{plan_id}")
def remove_plan(plan_id: str, tenant_db: Session = Depends(get_tenant_db)):
    deleted = investment_service.delete_plan(tenant_db, plan_id)
    return {"id": plan_id, "deleted": deleted}


# =====================================================
# CUSTOMER INVESTMENTS / PAYMENTS
# =====================================================

@router.get("", response_model=List[InvestmentOut])
def get_investments(tenant_db: Session = Depends(get_tenant_db)):
    return investment_service.list_investments(tenant_db)


@router.post("/{investment_id}/payments", response_model=InvestmentOut)
def record_payment(
    investment_id: str,
    body: PaymentEntry,
    tenant_db: Session = Depends(get_tenant_db),
):
    return investment_service.add_payment(tenant_db, investment_id, body)
