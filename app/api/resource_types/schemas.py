from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema
from app.db.models.resource_type import ResourceCategory

class ResourceTypeBase(BaseModel):
    name: str = Field(..., min_length=1)
    category: ResourceCategory

class ResourceTypeCreate(ResourceTypeBase):
    pass

class ResourceTypeUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "category")

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[ResourceCategory] = None

class ResourceTypeOut(ResourceTypeBase):
    id: int
    project_id: int

    model_config = {
        "from_attributes": True
    }
