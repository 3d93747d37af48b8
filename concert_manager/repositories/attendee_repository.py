from sqlalchemy.exc import IntegrityError
from concert_manager.utils.database import db_session_context
from concert_manager.entities.attendee import Attendee
from concert_manager.dto.auth import AttendeeRegister
from concert_manager.repositories.base import BaseRepository
from concert_manager.utils.exceptions import ConflictError
from concert_manager.utils.security import hash_password, verify_password
import logging

logger = logging.getLogger(__name__)


class AttendeeRepository(BaseRepository[Attendee, AttendeeRegister, AttendeeRegister]):
    def __init__(self):
        super().__init__(Attendee, "Attendee")

    def get_by_contact(self, contact_info: str) -> Attendee | None:
        db = db_session_context.get()
        return db.query(self.model).filter(self.model.contact_info == contact_info).first()

    def register(self, obj_in: AttendeeRegister) -> Attendee:
        db = db_session_context.get()
        if self.get_by_contact(obj_in.contact_info):
            raise ConflictError("Contact Info already in use. Please use a different contact info.")

        db_obj = self.model(
            name=obj_in.name,
            contact_info=obj_in.contact_info,
            password=hash_password(obj_in.password),
            phone=obj_in.phone,
            loyalty_points=0,
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same contact
            db.rollback()
            raise ConflictError("Contact Info already in use. Please use a different contact info.")
        db.refresh(db_obj)
        logger.info(f"Attendee {db_obj.id} registered")
        return db_obj

    def authenticate(self, contact_info: str, password: str) -> Attendee | None:
        attendee = self.get_by_contact(contact_info)
        if attendee is None or not verify_password(password, attendee.password):
            return None
        return attendee

attendee_repository = AttendeeRepository()
