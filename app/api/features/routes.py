from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("/{epic_id}/features", response_model=list[schemas.FeatureTreeOut])
def read_features(
    epic_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_features(db, epic_id, current_user.id)

@router.post("/{epic_id}/features", response_model=schemas.FeatureOut, status_code=status.HTTP_201_CREATED)
def create_feature(
    epic_id: int,
    feature: schemas.FeatureCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_feature(db, epic_id, feature, current_user.id)

@router.put("/{epic_id}/features/{feature_id}", response_model=schemas.FeatureOut)
def update_feature(
    epic_id: int,
    feature_id: int,
    feature: schemas.FeatureUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_feature(db, epic_id, feature_id, feature, current_user.id)

@router.delete("/{epic_id}/features/{feature_id}")
def delete_feature(
    epic_id: int,
    feature_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_feature(db, epic_id, feature_id, current_user.id)
    return {"message": "Deleted"}
