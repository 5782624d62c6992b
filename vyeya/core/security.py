from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
from jose import JWTError, jwt
from passlib.context import CryptContext
from vyeya.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    """El token no tiene firma válida, expiró o no trae el claim `sub`."""


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(subject), "exp": expire}
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.ALGORITHM)
    return encoded_jwt


def verify_token(token: str) -> str:
    """
    Verifica un token JWT y retorna el id del usuario (`sub`).

    Raises:
        InvalidTokenError: si la firma no es válida, el token expiró,
            está mal formado o no contiene `sub`.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError("Token sin subject")
    return subject


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # Pre-hash with SHA256 to ensure we never exceed bcrypt's 72-byte limit
    password_sha256 = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
    return pwd_context.verify(password_sha256, hashed_password)


def get_password_hash(password: str) -> str:
    # Pre-hash with SHA256 to ensure we never exceed bcrypt's 72-byte limit
    # SHA256 always produces a fixed-length output (64 hex characters)
    password_sha256 = hashlib.sha256(password.encode("utf-8")).hexdigest()
    return pwd_context.hash(password_sha256)
