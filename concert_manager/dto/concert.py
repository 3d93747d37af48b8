from datetime import date
from typing import Literal

from pydantic import Field

from concert_manager.dto import BaseSchema

ConcertStatus = Literal["Scheduled", "Completed", "Canceled"]

# HH:MM or HH:MM:SS, 24-hour clock
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class ConcertCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    concert_date: date = Field(alias="date")
    concert_time: str = Field(alias="time", pattern=TIME_PATTERN)
    venue_id: int
    artist_id: int
    manager_id: int
    ticket_sales_limit: int = Field(gt=0)
    price: float = Field(gt=0)
    status: ConcertStatus = "Scheduled"
    description: str | None = None
    streaming_id: int | None = None

class ConcertUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    concert_date: date | None = Field(default=None, alias="date")
    concert_time: str | None = Field(default=None, alias="time", pattern=TIME_PATTERN)
    venue_id: int | None = None
    artist_id: int | None = None
    manager_id: int | None = None
    ticket_sales_limit: int | None = Field(default=None, gt=0)
    price: float | None = Field(default=None, gt=0)
    status: ConcertStatus | None = None
    description: str | None = None
    streaming_id: int | None = None

class PriceUpdate(BaseSchema):
    price_increase: float


class ConcertVenue(BaseSchema):
    id: int
    name: str
    location: str
    capacity: int

class ConcertArtist(BaseSchema):
    id: int
    name: str
    genre: str

class ConcertManager(BaseSchema):
    id: int
    name: str

class ConcertStreamingPlatform(BaseSchema):
    id: int
    name: str
    url: str

class ConcertRatings(BaseSchema):
    average: float | None = None
    total_feedbacks: int = 0

class Concert(BaseSchema):
    id: int
    name: str
    concert_date: date = Field(alias="date")
    concert_time: str = Field(alias="time")
    status: str
    price: float
    description: str | None = None
    venue: ConcertVenue
    ticket_sales_limit: int
    tickets_sold: int
    remaining_capacity: int
    artist: ConcertArtist
    manager: ConcertManager
    streaming_platform: ConcertStreamingPlatform | None = None
    ratings: ConcertRatings


class ConcertRevenue(BaseSchema):
    revenue: float

class ConcertSummary(BaseSchema):
    name: str
    concert_date: date = Field(alias="date")
    concert_time: str = Field(alias="time")
    current_price: float
    ticket_limit: int
    tickets_sold: int
    sponsor_count: int
    total_revenue: float
    is_sold_out: bool

class PriceUpdateResponse(BaseSchema):
    message: str
