from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.post("/", response_model=schemas.ProjectDetailOut, status_code=status.HTTP_201_CREATED)
def create_project(
    project: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_project(db, project, current_user.id)

@router.get("/", response_model=list[schemas.ProjectOut])
def read_projects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_projects(db, current_user.id)

@router.get("/{project_id}", response_model=schemas.ProjectDetailOut)
def read_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_project(db, project_id, current_user.id)

@router.get("/{project_id}/estimate", response_model=schemas.ProjectEstimate)
def read_project_estimate(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.estimate_project(db, project_id, current_user.id)

@router.put("/{project_id}", response_model=schemas.ProjectOut)
def update_project(
    project_id: int,
    project: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_project(db, project_id, project, current_user.id)

@router.delete("/{project_id}")
def archive_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.archive_project(db, project_id, current_user.id)
    return {"message": "Project archived"}
