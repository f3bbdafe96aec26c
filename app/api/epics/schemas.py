from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema
from app.api.features.schemas import FeatureTreeOut

class EpicBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

class EpicCreate(EpicBase):
    pass

class EpicUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = ("name", "order")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    order: Optional[int] = None

class EpicOut(EpicBase):
    id: int
    order: int
    project_id: int

    model_config = {
        "from_attributes": True
    }

class EpicTreeOut(EpicOut):
    features: list[FeatureTreeOut] = []
