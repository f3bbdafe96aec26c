from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base


class FeatureTemplate(Base):
    """Reusable feature breakdown, shared by every project."""
    __tablename__ = "feature_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Tasks come back in the order they were added
    tasks = relationship(
        "TemplateTask", back_populates="template", cascade="all, delete",
        order_by="TemplateTask.id")
