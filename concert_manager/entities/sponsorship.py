from sqlalchemy import Column, Integer, String, Float, ForeignKey, Sequence
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin


class Sponsorship(Base, TimestampMixin):
    __tablename__ = "sponsorships"

    id = Column(Integer, Sequence("sponsor_seq"), primary_key=True)
    name = Column(String(255), nullable=False)
    contact_info = Column(String(255), nullable=False)
    contribution_amt = Column(Float, nullable=False)
    concert_id = Column(Integer, ForeignKey("concerts.id"), nullable=False, index=True)

    # Relationships
    concert = relationship("Concert", back_populates="sponsorships")

    def __repr__(self):
        return f"<Sponsorship(id={self.id}, name='{self.name}')>"
