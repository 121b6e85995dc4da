from datetime import datetime

from sqlalchemy.orm import Session

from app.core.errors import RecordNotFound
from app.models.tenant.tenant import PartnerUser
from app.schemas.partner import EarningEntry, PartnerOut
from app.services.remote import remote_operation


def parse_entry_date(value) -> datetime:
    """dd/mm/yyyy, anything else sorts last."""
    try:
        return datetime.strptime(str(value).strip(), "%d/%m/%Y")
    except ValueError:
        return datetime.min


def sort_history(history: list) -> list:
    # latest first
    return sorted(history, key=lambda e: parse_entry_date(e.get("date")), reverse=True)


def _to_out(partner: PartnerUser) -> PartnerOut:
    return PartnerOut(
        mobile=partner.mobile,
        name=partner.name or "",
        total_earning=partner.total_earning or 0,
        history=sort_history(partner.history or []),
    )


def get_partner(db: Session, mobile: str) -> PartnerOut:
    with remote_operation(db, "fetch partner"):
        partner = db.get(PartnerUser, mobile)
        if partner is None:
            raise RecordNotFound("Partner not found")
        return _to_out(partner)


def add_earning(db: Session, mobile: str, entry: EarningEntry) -> PartnerOut:
    """Appends one earning; the partner is created on first earning."""
    with remote_operation(db, "update earnings"):
        record = entry.model_dump(by_alias=True)
        partner = db.get(PartnerUser, mobile)

        if partner is None:
            partner = PartnerUser(
                mobile=mobile,
                name="",
                total_earning=entry.earning_amount,
                history=[record],
            )
            db.add(partner)
        else:
            partner.history = [*(partner.history or []), record]
            partner.total_earning = (partner.total_earning or 0) + entry.earning_amount

        db.commit()
        db.refresh(partner)
        return _to_out(partner)
