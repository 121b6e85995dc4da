import json
import os
import time
from pathlib import Path
from typing import Callable, Optional, Tuple

from pydantic import ValidationError

from app.core.logger import logger
from app.schemas.shop import ConnectionParams


class SessionStore:
    """
    Single-slot local persistence of the last logged-in shop.

    File layout:
        {"<key>": {"connectionParams": {...}, "expiresAt": <epoch millis>}}

    Expiry is only checked on load. Reading never extends the window.
    """

    def __init__(
        self,
        path,
        window_seconds: float,
        key: str = "jewellery_admin_session",
        clock: Callable[[], float] = time.time,
    ):
        self.path = Path(path)
        self.key = key
        self.window_ms = int(window_seconds * 1000)
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def save(self, params: ConnectionParams) -> int:
        expires_at = self._now_ms() + self.window_ms
        payload = {
            self.key: {
                "connectionParams": params.to_record(),
                "expiresAt": expires_at,
            }
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(payload), encoding="utf-8")
        os.replace(tmp, self.path)

        return expires_at

    def _read_slot(self) -> Optional[dict]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

        try:
            slot = json.loads(raw).get(self.key)
        except (ValueError, AttributeError):
            logger.warning(f"SESSION UNREADABLE | path={self.path}")
            return None

        return slot if isinstance(slot, dict) else None

    def is_expired(self, expires_at: int) -> bool:
        return self._now_ms() >= expires_at

    def load_slot(self) -> Optional[Tuple[ConnectionParams, int]]:
        """Returns (params, expiresAt) of a live session, or None."""
        slot = self._read_slot()
        if slot is None:
            return None

        try:
            expires_at = int(slot["expiresAt"])
            params = ConnectionParams.model_validate(slot["connectionParams"])
        except (KeyError, TypeError, ValueError, ValidationError):
            logger.warning(f"SESSION UNREADABLE | path={self.path}")
            return None

        if self.is_expired(expires_at):
            logger.info(f"SESSION EXPIRED | project_id={params.project_id}")
            self.clear()
            return None

        return params, expires_at

    def load(self) -> Optional[ConnectionParams]:
        slot = self.load_slot()
        return slot[0] if slot else None

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
