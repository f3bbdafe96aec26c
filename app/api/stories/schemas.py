from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema
from app.api.tasks.schemas import TaskOut

class UserStoryBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None

class UserStoryCreate(UserStoryBase):
    pass

class UserStoryUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "order")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None
    order: Optional[int] = None

class UserStoryOut(UserStoryBase):
    id: int
    order: int
    feature_id: int
    tasks: list[TaskOut] = []

    model_config = {
        "from_attributes": True
    }
