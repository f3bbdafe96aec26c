from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema
from app.api.stories.schemas import UserStoryOut

class FeatureBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None

class FeatureCreate(FeatureBase):
    pass

class FeatureUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "order")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    assumptions: Optional[str] = None
    order: Optional[int] = None

class FeatureOut(FeatureBase):
    id: int
    order: int
    epic_id: int

    model_config = {
        "from_attributes": True
    }

class FeatureTreeOut(FeatureOut):
    user_stories: list[UserStoryOut] = []
