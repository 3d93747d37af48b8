from pydantic import Field

from concert_manager.dto import BaseSchema

class VenueCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    capacity: int = Field(gt=0)
    availability_schedule: str | None = None
    facilities: str | None = None

class Venue(BaseSchema):
    venue_id: int
    name: str
    location: str
    capacity: int
    availability_schedule: str | None = None
    facilities: str | None = None

    @classmethod
    def from_entity(cls, venue) -> "Venue":
        return cls(
            venue_id=venue.id,
            name=venue.name,
            location=venue.location,
            capacity=venue.capacity,
            availability_schedule=venue.availability_schedule,
            facilities=venue.facilities,
        )
