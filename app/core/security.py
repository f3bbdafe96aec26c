import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import Unauthorized
from app.db.session import get_db
from app.db.models.user import User

logger = logging.getLogger(__name__)

# Used to extract token from Authorization header.
# auto_error is off so a missing header gets the same 401 as a bad token.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> int:
    """Return the user id carried by ``token``. Expired tokens fail in ``jwt.decode``."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning("JWT decode failed: %s", e)
        raise Unauthorized(f"Token is invalid: {e}")

    subject = payload.get("sub")
    if subject is None:
        logger.warning("JWT token missing 'sub' claim")
        raise Unauthorized()

    try:
        return int(subject)
    except (TypeError, ValueError):
        logger.warning("JWT 'sub' claim is not a user id: %r", subject)
        raise Unauthorized()


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    if not token:
        raise Unauthorized("Not authenticated")

    user_id = decode_access_token(token)

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning("User not found in DB for id: %s", user_id)
        raise Unauthorized()

    return user
