import threading
from enum import Enum
from typing import Optional

from app.core.errors import AlreadyAuthenticated, LoginInProgress, SessionSuperseded
from app.core.logger import logger
from app.core.session_store import SessionStore
from app.db.tenant import TenantConnectionRegistry
from app.schemas.shop import ConnectionParams


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class SessionContext:
    """
    Process-wide answer to "which shop is the operator working in".

    UNAUTHENTICATED <-> AUTHENTICATED(params). Login persists the session
    before resolving the handle, so a crash in between still leaves a
    session that the next start() picks up. The context falls back to
    UNAUTHENTICATED on its own once the session window has passed.
    """

    def __init__(self, store: SessionStore, registry: TenantConnectionRegistry):
        self.store = store
        self.registry = registry

        self._params: Optional[ConnectionParams] = None
        self._expires_at: Optional[int] = None
        self._generation = 0
        self._login_in_flight = False
        self._lock = threading.RLock()

    # -------------------------------------------------
    # state
    # -------------------------------------------------

    def _lapse_if_expired(self) -> None:
        # the window is fixed at login; once it passes the context drops the shop
        with self._lock:
            if self._expires_at is None or not self.store.is_expired(self._expires_at):
                return
            previous = self._params
            self._params = None
            self._expires_at = None
            self.store.clear()
            if previous is not None:
                logger.info(f"SESSION EXPIRED | project_id={previous.project_id}")

    @property
    def state(self) -> SessionState:
        if self.params is None:
            return SessionState.UNAUTHENTICATED
        return SessionState.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.params is not None

    @property
    def params(self) -> Optional[ConnectionParams]:
        self._lapse_if_expired()
        return self._params

    @property
    def expires_at(self) -> Optional[int]:
        self._lapse_if_expired()
        return self._expires_at

    @property
    def generation(self) -> int:
        return self._generation

    # -------------------------------------------------
    # transitions
    # -------------------------------------------------

    def start(self) -> SessionState:
        with self._lock:
            slot = self.store.load_slot()
            if slot is None:
                return self.state

            params, expires_at = slot
            try:
                self.registry.resolve(params)
            except Exception as e:
                # a stale slot must not keep the console from booting
                logger.error(
                    f"SESSION RESTORE FAILED | project_id={params.project_id} | error={e.__class__.__name__}"
                )
                self.store.clear()
                return SessionState.UNAUTHENTICATED

            self._params = params
            self._expires_at = expires_at
            logger.info(f"SESSION RESTORED | project_id={params.project_id}")
            return self.state

    def begin_login(self) -> int:
        with self._lock:
            if self.is_authenticated:
                raise AlreadyAuthenticated()
            if self._login_in_flight:
                raise LoginInProgress()
            self._login_in_flight = True
            return self._generation

    def end_login(self) -> None:
        with self._lock:
            self._login_in_flight = False

    def login(self, params: ConnectionParams, generation: Optional[int] = None) -> int:
        with self._lock:
            if generation is not None and generation != self._generation:
                logger.warning(f"LOGIN DISCARDED | project_id={params.project_id} | reason=superseded")
                raise SessionSuperseded()
            if self.is_authenticated:
                raise AlreadyAuthenticated()

            expires_at = self.store.save(params)
            try:
                self.registry.resolve(params)
            except Exception:
                self.store.clear()
                raise

            self._params = params
            self._expires_at = expires_at
            logger.info(f"SESSION STARTED | project_id={params.project_id}")
            return expires_at

    def logout(self) -> None:
        with self._lock:
            self.store.clear()
            previous = self._params
            self._params = None
            self._expires_at = None
            self._generation += 1
            if previous is not None:
                logger.info(f"SESSION CLOSED | project_id={previous.project_id}")
