from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Sequence, func
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base

TICKET_STATUS_ACTIVE = "ACTIVE"


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, Sequence("ticket_seq"), primary_key=True)
    price = Column(Float, nullable=False)
    purchase_date = Column(DateTime, nullable=False, default=func.now())
    status = Column(String(20), nullable=False, default=TICKET_STATUS_ACTIVE)
    concert_id = Column(Integer, ForeignKey("concerts.id"), nullable=False, index=True)
    attendee_id = Column(Integer, ForeignKey("attendees.id"), nullable=False, index=True)

    # Relationships
    concert = relationship("Concert", back_populates="tickets")
    attendee = relationship("Attendee", back_populates="tickets")

    def __repr__(self):
        return f"<Ticket(id={self.id}, status='{self.status}')>"
