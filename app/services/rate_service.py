from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import RecordAlreadyExists
from app.core.logger import logger
from app.models.tenant.tenant import MetalRates
from app.schemas.rates import MetalRatesIn, MetalRatesPatch
from app.services.remote import remote_operation


def get_rates(db: Session) -> Optional[MetalRates]:
    with remote_operation(db, "fetch metal rates"):
        return db.get(MetalRates, MetalRates.CURRENT)


def add_rates(db: Session, data: MetalRatesIn) -> MetalRates:
    # create only, never overwrite an existing snapshot
    with remote_operation(db, "add metal rates"):
        if db.get(MetalRates, MetalRates.CURRENT) is not None:
            logger.warning("METAL RATES EXIST | use update instead")
            raise RecordAlreadyExists("Metal rates already exist, use update instead")

        rates = MetalRates(id=MetalRates.CURRENT, **data.model_dump())
        db.add(rates)
        db.commit()
        db.refresh(rates)
        logger.info("METAL RATES CREATED")
        return rates


def update_rates(db: Session, data: MetalRatesPatch) -> MetalRates:
    """Merges the given fields into the snapshot, creating it if needed."""
    with remote_operation(db, "update metal rates"):
        rates = db.get(MetalRates, MetalRates.CURRENT)
        if rates is None:
            rates = MetalRates(id=MetalRates.CURRENT)
            db.add(rates)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(rates, field, value)
        db.commit()
        db.refresh(rates)
        logger.info("METAL RATES UPDATED")
        return rates


def delete_rates(db: Session) -> bool:
    with remote_operation(db, "delete metal rates"):
        deleted = db.query(MetalRates).filter(MetalRates.id == MetalRates.CURRENT).delete()
        db.commit()
        if deleted:
            logger.info("METAL RATES DELETED")
        return bool(deleted)
