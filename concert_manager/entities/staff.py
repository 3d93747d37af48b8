from sqlalchemy import Column, Integer, String, Sequence
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin


class Staff(Base, TimestampMixin):
    __tablename__ = "staff"

    id = Column(Integer, Sequence("staff_seq"), primary_key=True)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)

    # Relationships
    artists = relationship("Artist", back_populates="manager")
    concerts = relationship("Concert", back_populates="manager")

    def __repr__(self):
        return f"<Staff(id={self.id}, name='{self.name}')>"
