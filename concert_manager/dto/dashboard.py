from datetime import date, datetime

from pydantic import Field

from concert_manager.dto import BaseSchema


class DashboardStats(BaseSchema):
    name: str
    loyalty_points: int
    total_tickets: int
    total_spent: float
    total_reviews: int
    favorite_genre: str | None = None

class DashboardConcert(BaseSchema):
    id: int
    name: str
    concert_date: date = Field(alias="date")
    concert_time: str = Field(alias="time")
    status: str

class DashboardVenue(BaseSchema):
    name: str
    location: str

class DashboardArtist(BaseSchema):
    name: str
    genre: str

class DashboardFeedback(BaseSchema):
    rating: int
    comment: str | None = None

class DashboardTicket(BaseSchema):
    ticket_id: int
    price: float
    purchase_date: datetime
    ticket_status: str
    concert: DashboardConcert
    venue: DashboardVenue
    artist: DashboardArtist

class PastDashboardTicket(DashboardTicket):
    feedback: DashboardFeedback | None = None

class AttendeeDashboard(BaseSchema):
    attendee: DashboardStats
    upcoming_concerts: list[DashboardTicket] = []
    past_concerts: list[PastDashboardTicket] = []
