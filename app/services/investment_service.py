from typing import List

from sqlalchemy.orm import Session

from app.core.errors import RecordNotFound
from app.models.tenant.tenant import Investment, InvestmentPlan
from app.schemas.investment import InvestmentPlanIn, PaymentEntry
from app.services.remote import remote_operation


# =====================================================
# INVESTMENT PLANS (offered by the shop)
# =====================================================

def list_plans(db: Session) -> List[InvestmentPlan]:
    with remote_operation(db, "fetch investment plans"):
        return db.query(InvestmentPlan).order_by(InvestmentPlan.name).all()


def add_plan(db: Session, data: InvestmentPlanIn) -> InvestmentPlan:
    with remote_operation(db, "add investment plan"):
        plan = InvestmentPlan(**data.model_dump())
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan


def update_plan(db: Session, plan_id: str, data: InvestmentPlanIn) -> InvestmentPlan:
    with remote_operation(db, "update investment plan"):
        plan = db.get(InvestmentPlan, plan_id)
        if plan is None:
            raise RecordNotFound("Investment plan not found")

        for field, value in data.model_dump().items():
            setattr(plan, field, value)
        db.commit()
        db.refresh(plan)
        return plan


def delete_plan(db: Session, plan_id: str) -> bool:
    with remote_operation(db, "delete investment plan"):
        deleted = db.query(InvestmentPlan).filter(InvestmentPlan.id == plan_id).delete()
        db.commit()
        return bool(deleted)


# =====================================================
# CUSTOMER INVESTMENTS
# =====================================================

def list_investments(db: Session) -> List[Investment]:
    with remote_operation(db, "fetch investments"):
        return db.query(Investment).order_by(Investment.created_at).all()


def add_payment(db: Session, investment_id: str, entry: PaymentEntry) -> Investment:
    with remote_operation(db, "update payment history"):
        investment = db.get(Investment, investment_id)
        if investment is None:
            raise RecordNotFound("Investment not found")

        # new list object so the JSON column is flagged dirty
        investment.payment_history = [
            *(investment.payment_history or []),
            entry.model_dump(by_alias=True),
        ]
        db.commit()
        db.refresh(investment)
        return investment
