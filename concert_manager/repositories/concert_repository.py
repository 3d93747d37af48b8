from collections import Counter
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import joinedload
from concert_manager.entities.concert import Concert
from concert_manager.entities.ticket import Ticket, TICKET_STATUS_ACTIVE
from concert_manager.entities.feedback import Feedback
from concert_manager.entities.sponsorship import Sponsorship
from concert_manager.dto.concert import ConcertCreate, ConcertUpdate
from concert_manager.dto import concert as concert_schemas
from concert_manager.dto import dashboard as dashboard_schemas
from concert_manager.repositories.base import BaseRepository
from concert_manager.repositories.venue_repository import venue_repository
from concert_manager.repositories.artist_repository import artist_repository
from concert_manager.repositories.staff_repository import staff_repository
from concert_manager.repositories.streaming_repository import streaming_repository
from concert_manager.repositories.attendee_repository import attendee_repository
from concert_manager.utils.database import db_session_context
from concert_manager.utils.exceptions import ConflictError, NotFoundError
import logging

logger = logging.getLogger(__name__)


class ConcertRepository(BaseRepository[Concert, ConcertCreate, ConcertUpdate]):
    def __init__(self):
        super().__init__(Concert, "Concert")

    def _query(self):
        db = db_session_context.get()
        return db.query(self.model).options(
            joinedload(self.model.venue),
            joinedload(self.model.artist),
            joinedload(self.model.manager),
            joinedload(self.model.streaming_platform),
        )

    # Aggregates

    def count_sold(self, concert_id: int) -> int:
        db = db_session_context.get()
        return db.query(func.count(Ticket.id)).filter(
            Ticket.concert_id == concert_id,
            Ticket.status == TICKET_STATUS_ACTIVE,
        ).scalar()

    def _sold_counts(self, concert_ids: list[int]) -> dict[int, int]:
        db = db_session_context.get()
        rows = db.query(Ticket.concert_id, func.count(Ticket.id)).filter(
            Ticket.concert_id.in_(concert_ids),
            Ticket.status == TICKET_STATUS_ACTIVE,
        ).group_by(Ticket.concert_id).all()
        return dict(rows)

    def _rating_stats(self, concert_ids: list[int]) -> dict[int, tuple[float, int]]:
        db = db_session_context.get()
        rows = db.query(Feedback.concert_id, func.avg(Feedback.rating), func.count(Feedback.id)).filter(
            Feedback.concert_id.in_(concert_ids)
        ).group_by(Feedback.concert_id).all()
        return {concert_id: (average, total) for concert_id, average, total in rows}

    def _revenue(self, concert_id: int) -> float:
        db = db_session_context.get()
        total = db.query(func.coalesce(func.sum(Ticket.price), 0)).filter(
            Ticket.concert_id == concert_id,
            Ticket.status == TICKET_STATUS_ACTIVE,
        ).scalar()
        return float(total)

    def _to_schema(self, concert: Concert, sold: int, ratings: tuple[float, int] | None) -> concert_schemas.Concert:
        average, total_feedbacks = ratings or (None, 0)
        streaming = None
        if concert.streaming_platform is not None:
            streaming = concert_schemas.ConcertStreamingPlatform(
                id=concert.streaming_platform.id,
                name=concert.streaming_platform.name,
                url=concert.streaming_platform.url,
            )
        return concert_schemas.Concert(
            id=concert.id,
            name=concert.name,
            concert_date=concert.concert_date,
            concert_time=concert.concert_time,
            status=concert.status,
            price=concert.price,
            description=concert.description,
            venue=concert_schemas.ConcertVenue(
                id=concert.venue.id,
                name=concert.venue.name,
                location=concert.venue.location,
                capacity=concert.venue.capacity,
            ),
            ticket_sales_limit=concert.ticket_sales_limit,
            tickets_sold=sold,
            remaining_capacity=max(concert.ticket_sales_limit - sold, 0),
            artist=concert_schemas.ConcertArtist(
                id=concert.artist.id, name=concert.artist.name, genre=concert.artist.genre
            ),
            manager=concert_schemas.ConcertManager(id=concert.manager.id, name=concert.manager.name),
            streaming_platform=streaming,
            ratings=concert_schemas.ConcertRatings(
                average=round(float(average), 2) if average is not None else None,
                total_feedbacks=total_feedbacks,
            ),
        )

    # Reads

    def list_details(self) -> list[concert_schemas.Concert]:
        concerts = self._query().order_by(self.model.concert_date.desc(), self.model.id.desc()).all()
        if not concerts:
            return []
        ids = [concert.id for concert in concerts]
        sold = self._sold_counts(ids)
        ratings = self._rating_stats(ids)
        return [self._to_schema(c, sold.get(c.id, 0), ratings.get(c.id)) for c in concerts]

    def get_detail(self, concert_id: int) -> concert_schemas.Concert:
        """Get a concert with venue, artist, manager, sales and ratings joined in."""
        concert = self._query().filter(self.model.id == concert_id).first()
        if concert is None:
            raise NotFoundError("Concert not found")
        return self._to_schema(
            concert,
            self.count_sold(concert_id),
            self._rating_stats([concert_id]).get(concert_id),
        )

    # Writes

    def _check_references(self, data: dict, current: Concert | None = None) -> None:
        if data.get("venue_id") is not None:
            venue_repository.get_existing(data["venue_id"])
        if data.get("artist_id") is not None:
            artist_repository.get_existing(data["artist_id"])
        if data.get("manager_id") is not None:
            staff_repository.get_existing(data["manager_id"], "Manager not found")
        if data.get("streaming_id") is not None:
            streaming_repository.get_existing(data["streaming_id"])

        venue_id = data.get("venue_id") or (current.venue_id if current else None)
        limit = data.get("ticket_sales_limit") or (current.ticket_sales_limit if current else None)
        if venue_id is not None and limit is not None:
            venue = venue_repository.get_existing(venue_id)
            if limit > venue.capacity:
                raise ValueError(
                    f"Ticket sales limit ({limit}) exceeds venue capacity ({venue.capacity})"
                )

    def create(self, obj_in: ConcertCreate) -> concert_schemas.Concert:
        self._check_references(obj_in.model_dump())
        db_obj = super().create(obj_in)
        logger.info(f"Concert {db_obj.id} scheduled at venue {db_obj.venue_id}")
        return self.get_detail(db_obj.id)

    def update(self, concert_id: int, obj_in: ConcertUpdate) -> concert_schemas.Concert:
        concert = self.get_existing(concert_id)
        self._check_references(obj_in.model_dump(exclude_unset=True), current=concert)
        super().update(concert_id, obj_in)
        return self.get_detail(concert_id)

    def delete(self, concert_id: int) -> str:
        """Delete a concert together with its tickets, feedback and sponsorships."""
        db = db_session_context.get()
        concert = self.get_existing(concert_id)
        if concert.status == "Completed":
            raise ConflictError("Cannot delete a completed concert")

        ticket_count = len(concert.tickets)
        db.delete(concert)
        db.commit()
        return f"Concert {concert_id} and {ticket_count} ticket(s) deleted successfully"

    def update_price(self, concert_id: int, price_increase: float) -> str:
        db = db_session_context.get()
        concert = self.get_existing(concert_id)
        new_price = round(concert.price + price_increase, 2)
        if new_price <= 0:
            raise ValueError("Price must be greater than 0")

        concert.price = new_price
        db.commit()
        return f"Price updated successfully. New price: {new_price:.2f}"

    # Reports

    def revenue(self, concert_id: int) -> concert_schemas.ConcertRevenue:
        self.get_existing(concert_id)
        return concert_schemas.ConcertRevenue(revenue=self._revenue(concert_id))

    def summary(self, concert_id: int) -> concert_schemas.ConcertSummary:
        db = db_session_context.get()
        concert = self.get_existing(concert_id)
        sold = self.count_sold(concert_id)
        sponsor_count = db.query(func.count(Sponsorship.id)).filter(
            Sponsorship.concert_id == concert_id
        ).scalar()
        return concert_schemas.ConcertSummary(
            name=concert.name,
            concert_date=concert.concert_date,
            concert_time=concert.concert_time,
            current_price=concert.price,
            ticket_limit=concert.ticket_sales_limit,
            tickets_sold=sold,
            sponsor_count=sponsor_count,
            total_revenue=self._revenue(concert_id),
            is_sold_out=sold >= concert.ticket_sales_limit,
        )

    def attendee_dashboard(self, attendee_id: int) -> dashboard_schemas.AttendeeDashboard:
        db = db_session_context.get()
        attendee = attendee_repository.get_existing(attendee_id)

        tickets = db.query(Ticket).join(Ticket.concert).options(
            joinedload(Ticket.concert).joinedload(Concert.venue),
            joinedload(Ticket.concert).joinedload(Concert.artist),
        ).filter(Ticket.attendee_id == attendee_id).order_by(Concert.concert_date, Ticket.id).all()

        feedback_by_concert = {}
        feedbacks = db.query(Feedback).filter(Feedback.attendee_id == attendee_id).order_by(
            Feedback.created_date, Feedback.id
        ).all()
        for feedback in feedbacks:
            # latest review wins
            feedback_by_concert[feedback.concert_id] = feedback

        today = date.today()
        upcoming, past = [], []
        for ticket in tickets:
            concert = ticket.concert
            entry = dict(
                ticket_id=ticket.id,
                price=ticket.price,
                purchase_date=ticket.purchase_date,
                ticket_status=ticket.status,
                concert=dashboard_schemas.DashboardConcert(
                    id=concert.id,
                    name=concert.name,
                    concert_date=concert.concert_date,
                    concert_time=concert.concert_time,
                    status=concert.status,
                ),
                venue=dashboard_schemas.DashboardVenue(name=concert.venue.name, location=concert.venue.location),
                artist=dashboard_schemas.DashboardArtist(name=concert.artist.name, genre=concert.artist.genre),
            )
            if concert.concert_date >= today:
                upcoming.append(dashboard_schemas.DashboardTicket(**entry))
            else:
                feedback = feedback_by_concert.get(concert.id)
                if feedback is not None:
                    entry["feedback"] = dashboard_schemas.DashboardFeedback(
                        rating=feedback.rating, comment=feedback.comments
                    )
                past.append(dashboard_schemas.PastDashboardTicket(**entry))

        active = [t for t in tickets if t.status == TICKET_STATUS_ACTIVE]
        genres = Counter(t.concert.artist.genre for t in active)
        favorite_genre = None
        if genres:
            favorite_genre = sorted(genres.items(), key=lambda item: (-item[1], item[0]))[0][0]

        return dashboard_schemas.AttendeeDashboard(
            attendee=dashboard_schemas.DashboardStats(
                name=attendee.name,
                loyalty_points=attendee.loyalty_points,
                total_tickets=len(active),
                total_spent=round(sum(t.price for t in active), 2),
                total_reviews=len(feedbacks),
                favorite_genre=favorite_genre,
            ),
            upcoming_concerts=upcoming,
            past_concerts=list(reversed(past)),
        )

concert_repository = ConcertRepository()
