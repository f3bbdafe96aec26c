import enum

from sqlalchemy import Column, Integer, String, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.db.session import Base


class ResourceCategory(str, enum.Enum):
    ENGINEERING = "ENGINEERING"
    GOVERNANCE = "GOVERNANCE"
    PROJECT_MANAGEMENT = "PROJECT_MANAGEMENT"


class ResourceType(Base):
    __tablename__ = "resource_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(Enum(ResourceCategory, name="resource_category"), nullable=False)

    # Foreign Key
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)

    # Relationships
    project = relationship("Project", back_populates="resource_types")
    tasks = relationship("Task", back_populates="resource_type", lazy="dynamic")
