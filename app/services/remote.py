from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import RemoteOperationFailed
from app.core.logger import logger


@contextmanager
def remote_operation(db: Session, action: str):
    """
    One round trip to the shop database. Failures roll back and surface
    as RemoteOperationFailed. Nothing is retried.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"REMOTE OPERATION FAILED | action={action} | error={e.__class__.__name__}")
        raise RemoteOperationFailed(f"Failed to {action}") from e
