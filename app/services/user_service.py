from typing import List

from sqlalchemy.orm import Session

from app.models.tenant.tenant import User
from app.services.remote import remote_operation


def list_users(db: Session) -> List[User]:
    with remote_operation(db, "fetch users"):
        return db.query(User).order_by(User.created_at).all()
