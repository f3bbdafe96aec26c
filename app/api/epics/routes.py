from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("/{project_id}/epics", response_model=list[schemas.EpicTreeOut])
def read_epics(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_epic_tree(db, project_id, current_user.id)

@router.post("/{project_id}/epics", response_model=schemas.EpicOut, status_code=status.HTTP_201_CREATED)
def create_epic(
    project_id: int,
    epic: schemas.EpicCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_epic(db, project_id, epic, current_user.id)

@router.put("/{project_id}/epics/{epic_id}", response_model=schemas.EpicOut)
def update_epic(
    project_id: int,
    epic_id: int,
    epic: schemas.EpicUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_epic(db, project_id, epic_id, epic, current_user.id)

@router.delete("/{project_id}/epics/{epic_id}")
def delete_epic(
    project_id: int,
    epic_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_epic(db, project_id, epic_id, current_user.id)
    return {"message": "Deleted"}
