from sqlalchemy.orm import Session

from app.api.ownership import owned_epic
from app.core.exceptions import NotFound
from app.db.models.backlog import Epic, Feature
from app.db.ordering import lock_parent, next_order
from . import schemas


def get_features(db: Session, epic_id: int, user_id: int):
    owned_epic(db, epic_id, user_id)
    return db.query(Feature).filter(
        Feature.epic_id == epic_id
    ).order_by(Feature.order, Feature.id).all()

def get_feature(db: Session, epic_id: int, feature_id: int, user_id: int) -> Feature:
    owned_epic(db, epic_id, user_id)
    feature = db.query(Feature).filter(
        Feature.id == feature_id,
        Feature.epic_id == epic_id
    ).first()
    if not feature:
        raise NotFound("Feature not found")
    return feature

def create_feature(db: Session, epic_id: int, feature: schemas.FeatureCreate, user_id: int):
    owned_epic(db, epic_id, user_id)
    lock_parent(db, Epic, epic_id)
    db_feature = Feature(
        **feature.model_dump(),
        epic_id=epic_id,
        order=next_order(db, Feature.epic_id, epic_id),
    )
    db.add(db_feature)
    db.commit()
    db.refresh(db_feature)
    return db_feature

def update_feature(db: Session, epic_id: int, feature_id: int, feature: schemas.FeatureUpdate, user_id: int):
    db_feature = get_feature(db, epic_id, feature_id, user_id)
    for key, value in feature.changes().items():
        setattr(db_feature, key, value)
    db.commit()
    db.refresh(db_feature)
    return db_feature

def delete_feature(db: Session, epic_id: int, feature_id: int, user_id: int):
    db_feature = get_feature(db, epic_id, feature_id, user_id)
    db.delete(db_feature)
    db.commit()
