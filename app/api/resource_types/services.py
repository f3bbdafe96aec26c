from sqlalchemy.orm import Session

from app.api.ownership import owned_project
from app.core.exceptions import Conflict, NotFound
from app.db.models.resource_type import ResourceType
from app.db.models.backlog import Task
from . import schemas


def get_catalog(db: Session, project_id: int):
    """All resource types of a project in load order (oldest first)."""
    return db.query(ResourceType).filter(
        ResourceType.project_id == project_id
    ).order_by(ResourceType.id).all()


def get_resource_types(db: Session, project_id: int, user_id: int):
    owned_project(db, project_id, user_id)
    return db.query(ResourceType).filter(
        ResourceType.project_id == project_id
    ).order_by(ResourceType.name).all()


def get_resource_type(db: Session, project_id: int, resource_type_id: int, user_id: int) -> ResourceType:
    owned_project(db, project_id, user_id)
    resource_type = db.query(ResourceType).filter(
        ResourceType.id == resource_type_id,
        ResourceType.project_id == project_id
    ).first()
    if not resource_type:
        raise NotFound("Resource type not found")
    return resource_type


def create_resource_type(db: Session, project_id: int, resource_type: schemas.ResourceTypeCreate, user_id: int):
    owned_project(db, project_id, user_id)
    db_resource_type = ResourceType(**resource_type.model_dump(), project_id=project_id)
    db.add(db_resource_type)
    db.commit()
    db.refresh(db_resource_type)
    return db_resource_type


def update_resource_type(db: Session, project_id: int, resource_type_id: int,
                         resource_type: schemas.ResourceTypeUpdate, user_id: int):
    db_resource_type = get_resource_type(db, project_id, resource_type_id, user_id)
    for key, value in resource_type.changes().items():
        setattr(db_resource_type, key, value)
    db.commit()
    db.refresh(db_resource_type)
    return db_resource_type


def delete_resource_type(db: Session, project_id: int, resource_type_id: int, user_id: int):
    db_resource_type = get_resource_type(db, project_id, resource_type_id, user_id)
    in_use = db.query(Task).filter(Task.resource_type_id == db_resource_type.id).count()
    if in_use:
        raise Conflict(f"Resource type is assigned to {in_use} task(s)")
    db.delete(db_resource_type)
    db.commit()
