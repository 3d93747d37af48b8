from sqlalchemy import Column, Integer, String, ForeignKey, Sequence
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin


class Artist(Base, TimestampMixin):
    __tablename__ = "artists"

    id = Column(Integer, Sequence("artist_seq"), primary_key=True)
    name = Column(String(255), nullable=False)
    genre = Column(String(100), nullable=False)
    contact_info = Column(String(255), nullable=False)
    availability = Column(String(255))
    social_media_link = Column(String(500))
    manager_id = Column(Integer, ForeignKey("staff.id"))

    # Relationships
    manager = relationship("Staff", back_populates="artists")
    concerts = relationship("Concert", back_populates="artist")

    def __repr__(self):
        return f"<Artist(id={self.id}, name='{self.name}')>"
