from typing import Generator, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from vyeya.core.database import SessionLocal
from vyeya.core.errors import AuthenticationError
from vyeya.core.security import InvalidTokenError, verify_token
from vyeya.crud import user
from vyeya.models.user import User

# auto_error=False: los rechazos los decide get_current_user
security = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    try:
        db = SessionLocal()
        yield db
    finally:
        db.close()


def get_current_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    """
    Resuelve el usuario autenticado a partir del header `Authorization: Bearer`.

    - Sin header o con formato inválido: 401 "Access token required"
    - Token con firma inválida o expirado: 403 "Invalid or expired token"
    - Token válido pero usuario inexistente: 401 "Invalid token"
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    try:
        user_id = verify_token(credentials.credentials)
    except InvalidTokenError:
        raise AuthenticationError("Invalid or expired token", status_code=403)

    db_user = user.get(db, id=user_id)
    if db_user is None:
        raise AuthenticationError("Invalid token")

    return db_user
