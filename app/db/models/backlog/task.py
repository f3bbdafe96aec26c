from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    assumptions = Column(String, nullable=True)
    hours_effort = Column(Float, default=0, nullable=False)
    order = Column(Integer, default=0, nullable=False)

    # Foreign Keys
    user_story_id = Column(Integer, ForeignKey("user_stories.id"), nullable=False, index=True)
    # Must belong to the same project as the story's epic
    resource_type_id = Column(Integer, ForeignKey("resource_types.id"), nullable=False)

    # Relationships
    user_story = relationship("UserStory", back_populates="tasks")
    resource_type = relationship("ResourceType", back_populates="tasks")
