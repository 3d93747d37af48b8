from sqlalchemy import Column, Integer, String, Sequence
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base


class Attendee(Base):
    __tablename__ = "attendees"

    id = Column(Integer, Sequence("attendee_seq"), primary_key=True)
    name = Column(String(100), nullable=False)
    contact_info = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(30))
    loyalty_points = Column(Integer, nullable=False, default=0)

    # Relationships
    tickets = relationship("Ticket", back_populates="attendee")
    feedbacks = relationship("Feedback", back_populates="attendee")

    def __repr__(self):
        return f"<Attendee(id={self.id}, contact_info='{self.contact_info}')>"
