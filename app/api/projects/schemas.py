from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from app.api.schemas import UpdateSchema
from app.api.resource_types.schemas import ResourceTypeOut
from app.db.models.project import ProjectStatus


class ProjectBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    customer: Optional[str] = None

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "status")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    customer: Optional[str] = None
    status: Optional[ProjectStatus] = None

class ProjectOut(ProjectBase):
    id: int
    status: ProjectStatus
    owner_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

class ProjectDetailOut(ProjectOut):
    resource_types: list[ResourceTypeOut] = []


class ResourceEstimate(BaseModel):
    resource_type_id: int
    resource_type_name: str
    category: str
    hours: float
    days: float
    task_count: int

class ProjectEstimate(BaseModel):
    project_id: int
    total_hours: float
    total_days: float
    hours_per_day: int
    by_resource_type: list[ResourceEstimate]
