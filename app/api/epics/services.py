from sqlalchemy.orm import Session, selectinload

from app.api.ownership import owned_project
from app.core.exceptions import NotFound
from app.db.models.project import Project
from app.db.models.backlog import Epic, Feature, UserStory, Task
from app.db.ordering import lock_parent, next_order
from . import schemas


def get_epic_tree(db: Session, project_id: int, user_id: int):
    """Epics of a project with features, stories and tasks eagerly loaded."""
    owned_project(db, project_id, user_id)
    return db.query(Epic).filter(
        Epic.project_id == project_id
    ).options(
        selectinload(Epic.features)
        .selectinload(Feature.user_stories)
        .selectinload(UserStory.tasks)
        .selectinload(Task.resource_type)
    ).order_by(Epic.order, Epic.id).all()

def get_epic(db: Session, project_id: int, epic_id: int, user_id: int) -> Epic:
    owned_project(db, project_id, user_id)
    epic = db.query(Epic).filter(Epic.id == epic_id, Epic.project_id == project_id).first()
    if not epic:
        raise NotFound("Epic not found")
    return epic

def create_epic(db: Session, project_id: int, epic: schemas.EpicCreate, user_id: int):
    owned_project(db, project_id, user_id)
    lock_parent(db, Project, project_id)
    db_epic = Epic(
        **epic.model_dump(),
        project_id=project_id,
        order=next_order(db, Epic.project_id, project_id),
    )
    db.add(db_epic)
    db.commit()
    db.refresh(db_epic)
    return db_epic

def update_epic(db: Session, project_id: int, epic_id: int, epic: schemas.EpicUpdate, user_id: int):
    db_epic = get_epic(db, project_id, epic_id, user_id)
    for key, value in epic.changes().items():
        setattr(db_epic, key, value)
    db.commit()
    db.refresh(db_epic)
    return db_epic

def delete_epic(db: Session, project_id: int, epic_id: int, user_id: int):
    db_epic = get_epic(db, project_id, epic_id, user_id)
    db.delete(db_epic)
    db.commit()
