from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class Feature(Base):
    __tablename__ = "features"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    assumptions = Column(String, nullable=True)
    order = Column(Integer, default=0, nullable=False)

    # Foreign Key
    epic_id = Column(Integer, ForeignKey("epics.id"), nullable=False, index=True)

    # Relationships
    epic = relationship("Epic", back_populates="features")
    user_stories = relationship(
        "UserStory", back_populates="feature", cascade="all, delete",
        order_by="UserStory.order")
