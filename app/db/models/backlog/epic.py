from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class Epic(Base):
    __tablename__ = "epics"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    order = Column(Integer, default=0, nullable=False)

    # Foreign Key
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)

    # Relationships
    project = relationship("Project", back_populates="epics")
    features = relationship(
        "Feature", back_populates="epic", cascade="all, delete",
        order_by="Feature.order")
