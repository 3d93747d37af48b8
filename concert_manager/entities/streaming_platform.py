from sqlalchemy import Column, Integer, String, Date, Sequence
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin


class StreamingPlatform(Base, TimestampMixin):
    __tablename__ = "streaming_platforms"

    id = Column(Integer, Sequence("platform_seq"), primary_key=True)
    name = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
    streaming_date = Column(Date, nullable=False)

    # Relationships
    concerts = relationship("Concert", back_populates="streaming_platform")

    def __repr__(self):
        return f"<StreamingPlatform(id={self.id}, name='{self.name}')>"
