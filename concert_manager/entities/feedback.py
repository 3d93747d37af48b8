from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Sequence, CheckConstraint, func
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base


class Feedback(Base):
    __tablename__ = "feedback"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating"),)

    id = Column(Integer, Sequence("feedback_seq"), primary_key=True)
    concert_id = Column(Integer, ForeignKey("concerts.id"), nullable=False, index=True)
    attendee_id = Column(Integer, ForeignKey("attendees.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comments = Column(Text)
    created_date = Column(DateTime, nullable=False, default=func.now())

    # Relationships
    concert = relationship("Concert", back_populates="feedbacks")
    attendee = relationship("Attendee", back_populates="feedbacks")

    def __repr__(self):
        return f"<Feedback(id={self.id}, rating={self.rating})>"
