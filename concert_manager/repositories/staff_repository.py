from concert_manager.utils.database import db_session_context
from concert_manager.entities.staff import Staff
from concert_manager.entities.artist import Artist
from concert_manager.entities.concert import Concert
from concert_manager.dto.staff import StaffCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.utils.exceptions import ConflictError


class StaffRepository(BaseRepository[Staff, StaffCreate, StaffCreate]):
    def __init__(self):
        super().__init__(Staff, "Staff member")

    def list_all(self) -> list[Staff]:
        return self.list(self.model.name, self.model.id)

    def delete(self, id: int) -> Staff:
        db = db_session_context.get()
        staff = self.get_existing(id)
        if db.query(Concert.id).filter(Concert.manager_id == id).first():
            raise ConflictError("Staff member still manages concerts")
        if db.query(Artist.id).filter(Artist.manager_id == id).first():
            raise ConflictError("Staff member still manages artists")
        db.delete(staff)
        db.commit()
        return staff

staff_repository = StaffRepository()
