from sqlalchemy import Column, String, Integer, Sequence, CheckConstraint
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin

class Venue(Base,TimestampMixin):
    __tablename__ = "venues"
    __table_args__ = (CheckConstraint("capacity > 0", name="ck_venues_capacity"),)

    id = Column(Integer, Sequence("venue_seq"), primary_key=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)
    availability_schedule = Column(String(255))
    facilities = Column(String(500))

    # Relationships
    concerts = relationship("Concert", back_populates="venue")

    def __repr__(self):
        return f"<Venue(id={self.id}, name='{self.name}')>"
