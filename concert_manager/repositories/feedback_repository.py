from sqlalchemy.orm import joinedload

from concert_manager.utils.database import db_session_context
from concert_manager.entities.feedback import Feedback
from concert_manager.dto.feedback import FeedbackCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.repositories.concert_repository import concert_repository
from concert_manager.repositories.attendee_repository import attendee_repository


class FeedbackRepository(BaseRepository[Feedback, FeedbackCreate, FeedbackCreate]):
    def __init__(self):
        super().__init__(Feedback, "Feedback")

    def create(self, obj_in: FeedbackCreate) -> Feedback:
        # any concert status is accepted, only existence is checked
        concert_repository.get_existing(obj_in.concert_id)
        attendee_repository.get_existing(obj_in.attendee_id)
        return super().create(obj_in)

    def get_by_concert(self, concert_id: int) -> list[Feedback]:
        db = db_session_context.get()
        return db.query(self.model).options(
            joinedload(self.model.attendee),
            joinedload(self.model.concert),
        ).filter(self.model.concert_id == concert_id).order_by(
            self.model.created_date.desc(), self.model.id.desc()
        ).all()

feedback_repository = FeedbackRepository()
