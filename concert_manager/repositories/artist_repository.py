from sqlalchemy.orm import joinedload
from concert_manager.utils.database import db_session_context
from concert_manager.entities.artist import Artist
from concert_manager.entities.concert import Concert
from concert_manager.dto.artist import ArtistCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.repositories.staff_repository import staff_repository
from concert_manager.utils.exceptions import ConflictError


class ArtistRepository(BaseRepository[Artist, ArtistCreate, ArtistCreate]):
    def __init__(self):
        super().__init__(Artist, "Artist")

    def list_all(self) -> list[Artist]:
        db = db_session_context.get()
        return db.query(self.model).options(joinedload(self.model.manager)).order_by(
            self.model.name, self.model.id
        ).all()

    def create(self, obj_in: ArtistCreate) -> Artist:
        if obj_in.manager_id is not None:
            staff_repository.get_existing(obj_in.manager_id, "Specified manager not found")
        return super().create(obj_in)

    def delete(self, id: int) -> Artist:
        db = db_session_context.get()
        artist = self.get_existing(id)
        if db.query(Concert.id).filter(Concert.artist_id == id).first():
            raise ConflictError("Artist has concerts and cannot be deleted")
        db.delete(artist)
        db.commit()
        return artist

artist_repository = ArtistRepository()
