from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base


class TemplateTask(Base):
    __tablename__ = "template_tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    # Effort per complexity tier
    hours_small = Column(Float, default=0, nullable=False)
    hours_medium = Column(Float, default=0, nullable=False)
    hours_large = Column(Float, default=0, nullable=False)
    hours_extra_large = Column(Float, default=0, nullable=False)

    # Free text, matched by name against a project's resource types when applied
    resource_type_name = Column(String, nullable=False)

    # Foreign Key
    template_id = Column(Integer, ForeignKey("feature_templates.id"), nullable=False, index=True)

    # Relationships
    template = relationship("FeatureTemplate", back_populates="tasks")
