from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

# Reads are public

@router.get("/", response_model=list[schemas.TemplateOut])
def read_templates(db: Session = Depends(get_db)):
    return services.get_templates(db)

@router.get("/{template_id}", response_model=schemas.TemplateOut)
def read_template(template_id: int, db: Session = Depends(get_db)):
    return services.get_template(db, template_id)

# Writes need a logged-in user

@router.post("/", response_model=schemas.TemplateOut, status_code=status.HTTP_201_CREATED)
def create_template(
    template: schemas.TemplateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_template(db, template)

@router.put("/{template_id}", response_model=schemas.TemplateOut)
def update_template(
    template_id: int,
    template: schemas.TemplateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_template(db, template_id, template)

@router.delete("/{template_id}")
def delete_template(
    template_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_template(db, template_id)
    return {"message": "Deleted"}

@router.post("/{template_id}/tasks", response_model=schemas.TemplateTaskOut,
             status_code=status.HTTP_201_CREATED)
def create_template_task(
    template_id: int,
    task: schemas.TemplateTaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_template_task(db, template_id, task)

@router.put("/{template_id}/tasks/{task_id}", response_model=schemas.TemplateTaskOut)
def update_template_task(
    template_id: int,
    task_id: int,
    task: schemas.TemplateTaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_template_task(db, template_id, task_id, task)

@router.delete("/{template_id}/tasks/{task_id}")
def delete_template_task(
    template_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_template_task(db, template_id, task_id)
    return {"message": "Deleted"}
