import logging

from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, Unauthorized
from app.core.hashing import Hasher
from app.core.security import create_access_token
from app.db.models.user import User
from . import schemas

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, user: schemas.UserCreate) -> dict:
    if get_user_by_email(db, user.email):
        raise Conflict("Email already in use")

    new_user = User(
        email=user.email,
        name=user.name,
        hashed_password=Hasher.hash_password(user.password),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info("Registered user %s", new_user.id)
    return issue_token(new_user)


def authenticate_user(db: Session, credentials: schemas.UserLogin) -> dict:
    db_user = get_user_by_email(db, credentials.email)
    if not db_user or not Hasher.verify_password(credentials.password, db_user.hashed_password):
        logger.warning("Failed login for %s", credentials.email)
        raise Unauthorized("Invalid credentials")
    return issue_token(db_user)


def issue_token(user: User) -> dict:
    return {
        "access_token": create_access_token(user.id),
        "token_type": "bearer",
        "user": schemas.UserOut.model_validate(user),
    }
