from datetime import date, datetime

from pydantic import Field

from concert_manager.dto import BaseSchema


class TicketCreate(BaseSchema):
    concert_id: int
    attendee_id: int
    # defaults to the concert's current price
    price: float | None = Field(default=None, gt=0)

class TicketVenue(BaseSchema):
    name: str
    location: str

class TicketConcert(BaseSchema):
    id: int
    name: str
    concert_date: date = Field(alias="date")
    concert_time: str = Field(alias="time")
    venue: TicketVenue

class Ticket(BaseSchema):
    id: int
    price: float
    purchase_date: datetime
    status: str
    concert: TicketConcert

    @classmethod
    def from_entity(cls, ticket) -> "Ticket":
        concert = ticket.concert
        return cls(
            id=ticket.id,
            price=ticket.price,
            purchase_date=ticket.purchase_date,
            status=ticket.status,
            concert=TicketConcert(
                id=concert.id,
                name=concert.name,
                concert_date=concert.concert_date,
                concert_time=concert.concert_time,
                venue=TicketVenue(name=concert.venue.name, location=concert.venue.location),
            ),
        )
