"""Parent-chain lookups scoped to the acting user.

Every helper raises ``NotFound`` both when the row is missing and when it
belongs to someone else's project.
"""
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.db.models.project import Project
from app.db.models.backlog import Epic, Feature, UserStory


def owned_project(db: Session, project_id: int, user_id: int) -> Project:
    project = db.query(Project).filter(
        Project.id == project_id,
        Project.owner_id == user_id
    ).first()
    if not project:
        raise NotFound("Project not found")
    return project


def owned_epic(db: Session, epic_id: int, user_id: int) -> Epic:
    epic = db.query(Epic).join(Epic.project).filter(
        Epic.id == epic_id,
        Project.owner_id == user_id
    ).first()
    if not epic:
        raise NotFound("Epic not found")
    return epic


def owned_feature(db: Session, feature_id: int, user_id: int) -> Feature:
    feature = db.query(Feature).join(Feature.epic).join(Epic.project).filter(
        Feature.id == feature_id,
        Project.owner_id == user_id
    ).first()
    if not feature:
        raise NotFound("Feature not found")
    return feature


def owned_story(db: Session, story_id: int, user_id: int) -> UserStory:
    story = db.query(UserStory).join(UserStory.feature).join(Feature.epic).join(Epic.project).filter(
        UserStory.id == story_id,
        Project.owner_id == user_id
    ).first()
    if not story:
        raise NotFound("Story not found")
    return story


def project_id_for_story(story: UserStory) -> int:
    return story.feature.epic.project_id
