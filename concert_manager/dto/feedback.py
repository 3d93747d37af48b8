from datetime import datetime

from pydantic import Field

from concert_manager.dto import BaseSchema


class FeedbackCreate(BaseSchema):
    concert_id: int
    attendee_id: int
    rating: int = Field(ge=1, le=5)
    comments: str | None = Field(default=None, max_length=2000)

class Feedback(BaseSchema):
    id: int
    concert_id: int
    attendee_id: int
    rating: int
    comments: str | None = None
    created_date: datetime
    attendee_name: str
    concert_name: str

    @classmethod
    def from_entity(cls, feedback) -> "Feedback":
        return cls(
            id=feedback.id,
            concert_id=feedback.concert_id,
            attendee_id=feedback.attendee_id,
            rating=feedback.rating,
            comments=feedback.comments,
            created_date=feedback.created_date,
            attendee_name=feedback.attendee.name,
            concert_name=feedback.concert.name,
        )
