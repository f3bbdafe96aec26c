from sqlalchemy import func
from sqlalchemy.orm import Session

from app.api.ownership import owned_project
from app.config import settings
from app.db.models.project import Project, ProjectStatus
from app.db.models.resource_type import ResourceType, ResourceCategory
from app.db.models.backlog import Epic, Feature, UserStory, Task
from . import schemas

# Resource catalog every new project starts with
DEFAULT_RESOURCE_TYPES = [
    ("Business Analyst", ResourceCategory.ENGINEERING),
    ("Developer", ResourceCategory.ENGINEERING),
    ("Tech Lead", ResourceCategory.ENGINEERING),
    ("QA Engineer", ResourceCategory.ENGINEERING),
    ("Tech Governance", ResourceCategory.GOVERNANCE),
    ("Project Manager", ResourceCategory.PROJECT_MANAGEMENT),
]


def create_project(db: Session, project: schemas.ProjectCreate, user_id: int):
    db_project = Project(**project.model_dump(), owner_id=user_id)
    db_project.resource_types = [
        ResourceType(name=name, category=category) for name, category in DEFAULT_RESOURCE_TYPES
    ]
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    return db_project

def get_projects(db: Session, user_id: int):
    return db.query(Project).filter(
        Project.owner_id == user_id
    ).order_by(Project.updated_at.desc(), Project.id.desc()).all()

def get_project(db: Session, project_id: int, user_id: int):
    return owned_project(db, project_id, user_id)

def update_project(db: Session, project_id: int, project: schemas.ProjectUpdate, user_id: int):
    db_project = owned_project(db, project_id, user_id)
    for key, value in project.changes().items():
        setattr(db_project, key, value)
    db.commit()
    db.refresh(db_project)
    return db_project

def archive_project(db: Session, project_id: int, user_id: int):
    db_project = owned_project(db, project_id, user_id)
    db_project.status = ProjectStatus.ARCHIVED
    db.commit()
    return db_project


def estimate_project(db: Session, project_id: int, user_id: int) -> schemas.ProjectEstimate:
    """Sum task effort across the project's backlog, grouped by resource type."""
    owned_project(db, project_id, user_id)
    hours_per_day = settings.HOURS_PER_DAY

    rows = db.query(
        ResourceType.id,
        ResourceType.name,
        ResourceType.category,
        func.sum(Task.hours_effort),
        func.count(Task.id),
    ).select_from(Task).join(Task.resource_type).join(Task.user_story).join(
        UserStory.feature).join(Feature.epic).filter(
        Epic.project_id == project_id
    ).group_by(
        ResourceType.id, ResourceType.name, ResourceType.category
    ).order_by(ResourceType.name).all()

    breakdown = [
        schemas.ResourceEstimate(
            resource_type_id=rt_id,
            resource_type_name=name,
            category=category.value,
            hours=hours or 0,
            days=round((hours or 0) / hours_per_day, 2),
            task_count=count,
        )
        for rt_id, name, category, hours, count in rows
    ]
    total_hours = sum(item.hours for item in breakdown)
    return schemas.ProjectEstimate(
        project_id=project_id,
        total_hours=total_hours,
        total_days=round(total_hours / hours_per_day, 2),
        hours_per_day=hours_per_day,
        by_resource_type=breakdown,
    )
