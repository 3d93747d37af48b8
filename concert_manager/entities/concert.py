from sqlalchemy import Column, String, Date, ForeignKey, Text, Integer, Float, Sequence, CheckConstraint
from sqlalchemy.orm import relationship
from concert_manager.utils.database import Base
from concert_manager.entities import TimestampMixin

CONCERT_STATUSES = ("Scheduled", "Completed", "Canceled")


class Concert(Base,TimestampMixin):
    __tablename__ = "concerts"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_concerts_price"),
        CheckConstraint("ticket_sales_limit > 0", name="ck_concerts_ticket_sales_limit"),
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in CONCERT_STATUSES) + ")",
            name="ck_concerts_status",
        ),
    )

    id = Column(Integer, Sequence("concert_seq"), primary_key=True)
    name = Column(String(255), nullable=False)
    concert_date = Column(Date, nullable=False, index=True)
    concert_time = Column(String(8), nullable=False)
    venue_id = Column(Integer, ForeignKey("venues.id"), nullable=False)
    artist_id = Column(Integer, ForeignKey("artists.id"), nullable=False)
    manager_id = Column(Integer, ForeignKey("staff.id"), nullable=False)
    streaming_id = Column(Integer, ForeignKey("streaming_platforms.id"))
    ticket_sales_limit = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="Scheduled")
    description = Column(Text)

    # Relationships
    venue = relationship("Venue", back_populates="concerts")
    artist = relationship("Artist", back_populates="concerts")
    manager = relationship("Staff", back_populates="concerts")
    streaming_platform = relationship("StreamingPlatform", back_populates="concerts")
    tickets = relationship("Ticket", back_populates="concert", cascade="all, delete-orphan")
    feedbacks = relationship("Feedback", back_populates="concert", cascade="all, delete-orphan")
    sponsorships = relationship("Sponsorship", back_populates="concert", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Concert(id={self.id}, name='{self.name}')>"
