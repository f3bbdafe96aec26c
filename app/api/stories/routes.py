from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("/{feature_id}/stories", response_model=list[schemas.UserStoryOut])
def read_stories(
    feature_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_stories(db, feature_id, current_user.id)

@router.post("/{feature_id}/stories", response_model=schemas.UserStoryOut, status_code=status.HTTP_201_CREATED)
def create_story(
    feature_id: int,
    story: schemas.UserStoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_story(db, feature_id, story, current_user.id)

@router.put("/{feature_id}/stories/{story_id}", response_model=schemas.UserStoryOut)
def update_story(
    feature_id: int,
    story_id: int,
    story: schemas.UserStoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_story(db, feature_id, story_id, story, current_user.id)

@router.delete("/{feature_id}/stories/{story_id}")
def delete_story(
    feature_id: int,
    story_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_story(db, feature_id, story_id, current_user.id)
    return {"message": "Deleted"}
