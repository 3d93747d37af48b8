from sqlalchemy.orm import joinedload

from concert_manager.utils.database import db_session_context
from concert_manager.entities.sponsorship import Sponsorship
from concert_manager.dto.sponsorship import SponsorshipCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.repositories.concert_repository import concert_repository


class SponsorshipRepository(BaseRepository[Sponsorship, SponsorshipCreate, SponsorshipCreate]):
    def __init__(self):
        super().__init__(Sponsorship, "Sponsorship")

    def _query(self):
        db = db_session_context.get()
        return db.query(self.model).options(joinedload(self.model.concert))

    def list_all(self) -> list[Sponsorship]:
        return self._query().order_by(self.model.id).all()

    def get_by_concert(self, concert_id: int) -> list[Sponsorship]:
        return self._query().filter(self.model.concert_id == concert_id).order_by(self.model.id).all()

    def create(self, obj_in: SponsorshipCreate) -> Sponsorship:
        concert_repository.get_existing(obj_in.concert_id)
        return super().create(obj_in)

sponsorship_repository = SponsorshipRepository()
