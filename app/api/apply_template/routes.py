from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from app.api.stories.schemas import UserStoryOut
from . import schemas, services

router = APIRouter()

@router.post("/{feature_id}/apply-template", response_model=UserStoryOut,
             status_code=status.HTTP_201_CREATED)
def apply_template(
    feature_id: int,
    body: schemas.ApplyTemplate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.apply_template(db, feature_id, body.template_id, body.complexity, current_user.id)
