from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("/{project_id}/resource-types", response_model=list[schemas.ResourceTypeOut])
def read_resource_types(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.get_resource_types(db, project_id, current_user.id)

@router.post("/{project_id}/resource-types", response_model=schemas.ResourceTypeOut,
             status_code=status.HTTP_201_CREATED)
def create_resource_type(
    project_id: int,
    resource_type: schemas.ResourceTypeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_resource_type(db, project_id, resource_type, current_user.id)

@router.put("/{project_id}/resource-types/{resource_type_id}", response_model=schemas.ResourceTypeOut)
def update_resource_type(
    project_id: int,
    resource_type_id: int,
    resource_type: schemas.ResourceTypeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_resource_type(db, project_id, resource_type_id, resource_type, current_user.id)

@router.delete("/{project_id}/resource-types/{resource_type_id}")
def delete_resource_type(
    project_id: int,
    resource_type_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_resource_type(db, project_id, resource_type_id, current_user.id)
    return {"message": "Deleted"}
