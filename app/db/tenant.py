import threading
from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import TenantNotInitialized
from app.core.logger import logger
from app.schemas.shop import ConnectionParams


EngineFactory = Callable[[ConnectionParams], Engine]


class TenantConnection:
    """A live handle on one shop's database."""

    def __init__(self, params: ConnectionParams, engine: Engine):
        self.params = params
        self.engine = engine
        self._sessionmaker = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine
        )

    def session(self) -> Session:
        return self._sessionmaker()

    def dispose(self) -> None:
        self.engine.dispose()


class TenantConnectionRegistry:
    """Holds the single tenant handle of this process.

    The first successful resolve wins. Later resolves return the same handle
    even for different params, since every feature router assumes the handle
    stays the same for the life of the process.
    """

    def __init__(self, engine_factory: EngineFactory):
        self._engine_factory = engine_factory
        self._handle: Optional[TenantConnection] = None
        self._lock = threading.Lock()

    def resolve(self, params: ConnectionParams) -> TenantConnection:
        with self._lock:
            if self._handle is None:
                engine = self._engine_factory(params)
                self._handle = TenantConnection(params, engine)
                logger.info(f"TENANT RESOLVED | project_id={params.project_id}")
            elif self._handle.params != params:
                logger.warning(
                    f"TENANT RESOLVE IGNORED | active={self._handle.params.project_id} "
                    f"| requested={params.project_id}"
                )
            return self._handle

    def get_handle(self) -> Optional[TenantConnection]:
        return self._handle

    def require_handle(self) -> TenantConnection:
        handle = self._handle
        if handle is None:
            raise TenantNotInitialized()
        return handle

    def dispose(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.dispose()
