import hashlib
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from placement_portal.config import settings
from placement_portal.core.errors import InvalidSession
from placement_portal.models.enums import Role


def _prehash(password: str) -> bytes:
    """Pre-hash to avoid bcrypt's 72-byte limit."""
    return hashlib.sha256(password.encode()).digest()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=settings.bcrypt_rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_prehash(plain), hashed.encode())


def create_access_token(subject: str, role: Role) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {"sub": subject, "role": Role(role).value, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> tuple[str, Role]:
    """Return (subject id, role) or raise InvalidSession."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise InvalidSession("Session expired, please log in again") from e
    except JWTError as e:
        raise InvalidSession() from e
    subject = payload.get("sub")
    try:
        role = Role(payload.get("role"))
    except ValueError as e:
        raise InvalidSession() from e
    if not subject:
        raise InvalidSession()
    return subject, role


def generate_id() -> str:
    return str(uuid4())
