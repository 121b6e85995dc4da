from sqlalchemy.engine import Engine
from app.db.base import Base
from app.models import master  # noqa: F401  registers Shop on Base.metadata
from app.core.logger import logger


def init_master_db(engine: Engine) -> None:
    logger.info("MASTER DB INIT STARTED")
    Base.metadata.create_all(bind=engine)
    logger.info("MASTER DB TABLES READY")
