from datetime import datetime
from pydantic import BaseModel, Field
from typing import ClassVar, Optional

from app.api.schemas import UpdateSchema


class TemplateTaskBase(BaseModel):
    name: str = Field(..., min_length=1)
    hours_small: float = Field(0, ge=0)
    hours_medium: float = Field(0, ge=0)
    hours_large: float = Field(0, ge=0)
    hours_extra_large: float = Field(0, ge=0)
    resource_type_name: str = Field(..., min_length=1)

class TemplateTaskCreate(TemplateTaskBase):
    pass

class TemplateTaskUpdate(UpdateSchema):
    not_nullable: ClassVar[tuple[str, ...]] = (
        "name", "hours_small", "hours_medium", "hours_large", "hours_extra_large", "resource_type_name",
    )

    name: Optional[str] = Field(None, min_length=1)
    hours_small: Optional[float] = Field(None, ge=0)
    hours_medium: Optional[float] = Field(None, ge=0)
    hours_large: Optional[float] = Field(None, ge=0)
    hours_extra_large: Optional[float] = Field(None, ge=0)
    resource_type_name: Optional[str] = Field(None, min_length=1)

class TemplateTaskOut(TemplateTaskBase):
    id: int
    template_id: int

    model_config = {
        "from_attributes": True
    }


class TemplateBase(BaseModel):
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    description: Optional[str] = None

class TemplateCreate(TemplateBase):
    pass

class TemplateUpdate(UpdateSchema):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    description: Optional[str] = None

class TemplateOut(TemplateBase):
    id: int
    tasks: list[TemplateTaskOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
