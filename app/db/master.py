from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings


def create_master_engine(settings: Settings) -> Engine:
    return create_engine(settings.MASTER_DB_URL, pool_pre_ping=True)


def create_master_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
