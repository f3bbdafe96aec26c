from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("/{story_id}/tasks", response_model=list[schemas.TaskOut])
def read_tasks(
    story_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_tasks(db, story_id, current_user.id)

@router.post("/{story_id}/tasks", response_model=schemas.TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    story_id: int,
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_task(db, story_id, task, current_user.id)

@router.put("/{story_id}/tasks/{task_id}", response_model=schemas.TaskOut)
def update_task(
    story_id: int,
    task_id: int,
    task: schemas.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_task(db, story_id, task_id, task, current_user.id)

@router.delete("/{story_id}/tasks/{task_id}")
def delete_task(
    story_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_task(db, story_id, task_id, current_user.id)
    return {"message": "Deleted"}
