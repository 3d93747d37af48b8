from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import TIMESTAMP, func
from datetime import datetime



class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        default=func.now(),
        onupdate=func.now(),
        nullable=False
    )


# Register every mapped class so relationship() strings resolve and
# Base.metadata knows all tables.
from concert_manager.entities.attendee import Attendee
from concert_manager.entities.admin_user import AdminUser
from concert_manager.entities.staff import Staff
from concert_manager.entities.venue import Venue
from concert_manager.entities.artist import Artist
from concert_manager.entities.streaming_platform import StreamingPlatform
from concert_manager.entities.concert import Concert
from concert_manager.entities.ticket import Ticket
from concert_manager.entities.feedback import Feedback
from concert_manager.entities.sponsorship import Sponsorship
