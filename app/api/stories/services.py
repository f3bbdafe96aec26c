from sqlalchemy.orm import Session

from app.api.ownership import owned_feature
from app.core.exceptions import NotFound
from app.db.models.backlog import Feature, UserStory
from app.db.ordering import lock_parent, next_order
from . import schemas


def get_stories(db: Session, feature_id: int, user_id: int):
    owned_feature(db, feature_id, user_id)
    return db.query(UserStory).filter(
        UserStory.feature_id == feature_id
    ).order_by(UserStory.order, UserStory.id).all()

def get_story(db: Session, feature_id: int, story_id: int, user_id: int) -> UserStory:
    owned_feature(db, feature_id, user_id)
    story = db.query(UserStory).filter(
        UserStory.id == story_id,
        UserStory.feature_id == feature_id
    ).first()
    if not story:
        raise NotFound("Story not found")
    return story

def create_story(db: Session, feature_id: int, story: schemas.UserStoryCreate, user_id: int):
    owned_feature(db, feature_id, user_id)
    lock_parent(db, Feature, feature_id)
    db_story = UserStory(
        **story.model_dump(),
        feature_id=feature_id,
        order=next_order(db, UserStory.feature_id, feature_id),
    )
    db.add(db_story)
    db.commit()
    db.refresh(db_story)
    return db_story

def update_story(db: Session, feature_id: int, story_id: int, story: schemas.UserStoryUpdate, user_id: int):
    db_story = get_story(db, feature_id, story_id, user_id)
    for key, value in story.changes().items():
        setattr(db_story, key, value)
    db.commit()
    db.refresh(db_story)
    return db_story

def delete_story(db: Session, feature_id: int, story_id: int, user_id: int):
    db_story = get_story(db, feature_id, story_id, user_id)
    db.delete(db_story)
    db.commit()
