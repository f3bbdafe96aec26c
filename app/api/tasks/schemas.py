from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema
from app.api.resource_types.schemas import ResourceTypeOut

class TaskBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None
    hours_effort: float = Field(0, ge=0)

class TaskCreate(TaskBase):
    resource_type_id: int

class TaskUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "hours_effort", "resource_type_id", "order")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None
    hours_effort: Optional[float] = Field(None, ge=0)
    resource_type_id: Optional[int] = None
    order: Optional[int] = None

class TaskOut(TaskBase):
    id: int
    order: int
    user_story_id: int
    resource_type_id: int
    resource_type: ResourceTypeOut

    model_config = {
        "from_attributes": True
    }
