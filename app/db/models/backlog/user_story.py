from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class UserStory(Base):
    __tablename__ = "user_stories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    assumptions = Column(String, nullable=True)
    order = Column(Integer, default=0, nullable=False)

    # Foreign Key
    feature_id = Column(Integer, ForeignKey("features.id"), nullable=False, index=True)

    # Relationships
    feature = relationship("Feature", back_populates="user_stories")
    tasks = relationship(
        "Task", back_populates="user_story", cascade="all, delete",
        order_by="Task.order")
