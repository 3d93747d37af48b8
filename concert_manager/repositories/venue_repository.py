from concert_manager.utils.database import db_session_context
from concert_manager.entities.venue import Venue
from concert_manager.entities.concert import Concert
from concert_manager.dto.venue import VenueCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.utils.exceptions import ConflictError


class VenueRepository(BaseRepository[Venue, VenueCreate, VenueCreate]):
    def __init__(self):
        super().__init__(Venue, "Venue")

    def list_all(self) -> list[Venue]:
        return self.list(self.model.name, self.model.id)

    def delete(self, id: int) -> Venue:
        db = db_session_context.get()
        venue = self.get_existing(id)
        if db.query(Concert.id).filter(Concert.venue_id == id).first():
            raise ConflictError("Venue has concerts and cannot be deleted")
        db.delete(venue)
        db.commit()
        return venue

venue_repository = VenueRepository()
