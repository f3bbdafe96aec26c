from typing import Optional

from sqlalchemy.orm import Session

from app.api.ownership import owned_story, project_id_for_story
from app.core.exceptions import InvalidInput, NotFound
from app.db.models.backlog import Task, UserStory
from app.db.models.resource_type import ResourceType
from app.db.ordering import lock_parent, next_order
from . import schemas


def _check_resource_type(db: Session, resource_type_id: int, project_id: int):
    exists = db.query(ResourceType.id).filter(
        ResourceType.id == resource_type_id,
        ResourceType.project_id == project_id
    ).first()
    if not exists:
        raise InvalidInput("resource_type_id must reference a resource type of this project")


def get_tasks(db: Session, story_id: int, user_id: int):
    owned_story(db, story_id, user_id)
    return db.query(Task).filter(Task.user_story_id == story_id).order_by(Task.order, Task.id).all()

def get_task(db: Session, story_id: int, task_id: int, user_id: int) -> Task:
    owned_story(db, story_id, user_id)
    task = db.query(Task).filter(Task.id == task_id, Task.user_story_id == story_id).first()
    if not task:
        raise NotFound("Task not found")
    return task

def create_task(db: Session, story_id: int, task: schemas.TaskCreate, user_id: int):
    story = owned_story(db, story_id, user_id)
    _check_resource_type(db, task.resource_type_id, project_id_for_story(story))

    lock_parent(db, UserStory, story_id)
    db_task = Task(
        **task.model_dump(),
        user_story_id=story_id,
        order=next_order(db, Task.user_story_id, story_id),
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    return db_task

def update_task(db: Session, story_id: int, task_id: int, task: schemas.TaskUpdate, user_id: int):
    db_task = get_task(db, story_id, task_id, user_id)
    changes = task.changes()
    resource_type_id: Optional[int] = changes.get("resource_type_id")
    if resource_type_id is not None:
        _check_resource_type(db, resource_type_id, project_id_for_story(db_task.user_story))

    for key, value in changes.items():
        setattr(db_task, key, value)
    db.commit()
    db.refresh(db_task)
    return db_task

def delete_task(db: Session, story_id: int, task_id: int, user_id: int):
    db_task = get_task(db, story_id, task_id, user_id)
    db.delete(db_task)
    db.commit()
