import secrets
from datetime import datetime, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.errors import NotAuthenticated

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)


def _normalize_password(password: str) -> str:
    """
    bcrypt only looks at the first 72 bytes.
    UTF-8 safe truncate.
    """
    return password.encode("utf-8")[:72].decode("utf-8", errors="ignore")


def hash_password(password: str) -> str:
    return pwd_context.hash(_normalize_password(password))


# =====================================================
# SHOP PASSWORD VERIFIERS
# =====================================================

class PasswordVerifier:
    """Compares an operator-supplied password with the stored shop secret."""

    def verify(self, password: str, stored: Optional[str]) -> bool:
        raise NotImplementedError


class PlaintextPasswordVerifier(PasswordVerifier):
    # master directory keeps shop passwords in clear text
    def verify(self, password: str, stored: Optional[str]) -> bool:
        if stored is None:
            return False
        return secrets.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))


class BcryptPasswordVerifier(PasswordVerifier):
    def verify(self, password: str, stored: Optional[str]) -> bool:
        if not stored:
            return False
        try:
            return pwd_context.verify(_normalize_password(password), stored)
        except ValueError:
            # stored value is not a bcrypt hash
            return False


def get_password_verifier(scheme: str) -> PasswordVerifier:
    verifiers = {
        "plaintext": PlaintextPasswordVerifier,
        "bcrypt": BcryptPasswordVerifier,
    }
    try:
        return verifiers[scheme.lower()]()
    except KeyError:
        raise ValueError(f"Unknown SHOP_PASSWORD_SCHEME: {scheme}") from None


# =====================================================
# SESSION TOKEN
# =====================================================

def create_access_token(data: dict, expires_at_ms: int, settings: Settings) -> str:
    to_encode = data.copy()
    expire = datetime.fromtimestamp(expires_at_ms / 1000, tz=timezone.utc)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise NotAuthenticated("Invalid or expired token")
