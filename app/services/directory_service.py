from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.errors import DirectoryLookupFailed, InvalidCredentials, ShopNotFound
from app.core.logger import logger
from app.core.security import PasswordVerifier, PlaintextPasswordVerifier
from app.models.master.master import Shop
from app.schemas.shop import ConnectionParams


class MasterDirectoryClient:
    """Resolves (shop_id, password) into the shop's connection parameters."""

    def __init__(self, session_factory: sessionmaker, verifier: Optional[PasswordVerifier] = None):
        self._session_factory = session_factory
        self._verifier = verifier or PlaintextPasswordVerifier()

    def _get_shop(self, shop_id: str) -> Optional[Shop]:
        db = self._session_factory()
        try:
            shop = db.query(Shop).filter(Shop.shop_id == shop_id).first()
            if shop is not None:
                db.expunge(shop)
            return shop
        except SQLAlchemyError as e:
            logger.error(f"DIRECTORY LOOKUP FAILED | shop_id={shop_id} | error={e.__class__.__name__}")
            raise DirectoryLookupFailed() from e
        finally:
            db.close()

    def authenticate(self, shop_id: str, password: str) -> ConnectionParams:
        shop = self._get_shop(shop_id)

        if shop is None:
            logger.warning(f"LOGIN FAILED | shop_id={shop_id} | reason=not_found")
            raise ShopNotFound()

        if not self._verifier.verify(password, shop.password):
            logger.warning(f"LOGIN FAILED | shop_id={shop_id} | reason=invalid_password")
            raise InvalidCredentials()

        try:
            return ConnectionParams.from_shop(shop)
        except ValidationError as e:
            logger.error(f"DIRECTORY RECORD INVALID | shop_id={shop_id} | errors={e.error_count()}")
            raise DirectoryLookupFailed() from e
