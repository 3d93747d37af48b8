from sqlalchemy.orm import joinedload

from concert_manager.utils.database import db_session_context
from concert_manager.entities.ticket import Ticket, TICKET_STATUS_ACTIVE
from concert_manager.entities.concert import Concert
from concert_manager.dto.ticket import TicketCreate
from concert_manager.repositories.base import BaseRepository
from concert_manager.repositories.concert_repository import concert_repository
from concert_manager.repositories.attendee_repository import attendee_repository
from concert_manager.utils.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)


class TicketRepository(BaseRepository[Ticket, TicketCreate, TicketCreate]):
    def __init__(self):
        super().__init__(Ticket, "Ticket")

    def _query(self):
        db = db_session_context.get()
        return db.query(self.model).join(self.model.concert).options(
            joinedload(self.model.concert).joinedload(Concert.venue)
        )

    def create(self, obj_in: TicketCreate) -> Ticket:
        db = db_session_context.get()

        # Lock the concert row so concurrent purchases see each other's tickets
        concert = db.query(Concert).filter(Concert.id == obj_in.concert_id).with_for_update().first()
        if not concert:
            raise NotFoundError("Concert not found")
        attendee_repository.get_existing(obj_in.attendee_id)

        if concert.status != "Scheduled":
            raise ValueError(f"Tickets are not on sale for a {concert.status.lower()} concert")

        sold = concert_repository.count_sold(concert.id)
        if sold >= concert.ticket_sales_limit:
            raise ValueError("Concert is sold out")

        db_obj = self.model(
            price=obj_in.price if obj_in.price is not None else concert.price,
            concert_id=concert.id,
            attendee_id=obj_in.attendee_id,
            status=TICKET_STATUS_ACTIVE,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"Ticket {db_obj.id} issued for concert {concert.id} ({sold + 1}/{concert.ticket_sales_limit})")
        return db_obj

    def get_by_attendee(self, attendee_id: int) -> list[Ticket]:
        return self._query().filter(self.model.attendee_id == attendee_id).order_by(
            Concert.concert_date.desc(), self.model.id.desc()
        ).all()

    def get_by_concert_and_attendee(self, concert_id: int, attendee_id: int) -> Ticket:
        ticket = self._query().filter(
            self.model.concert_id == concert_id,
            self.model.attendee_id == attendee_id,
        ).order_by(self.model.id).first()
        if not ticket:
            raise NotFoundError("Ticket not found")
        return ticket

ticket_repository = TicketRepository()
