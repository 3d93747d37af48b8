from datetime import date

from pydantic import Field

from concert_manager.dto import BaseSchema


class SponsorshipCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    contact_info: str = Field(min_length=1, max_length=255)
    contribution_amt: float = Field(gt=0)
    concert_id: int

class SponsorshipConcert(BaseSchema):
    id: int
    name: str
    concert_date: date = Field(alias="date")

class Sponsorship(BaseSchema):
    sponsor_id: int
    name: str
    contact_info: str
    contribution_amt: float
    concert: SponsorshipConcert

    @classmethod
    def from_entity(cls, sponsorship) -> "Sponsorship":
        return cls(
            sponsor_id=sponsorship.id,
            name=sponsorship.name,
            contact_info=sponsorship.contact_info,
            contribution_amt=sponsorship.contribution_amt,
            concert=SponsorshipConcert(
                id=sponsorship.concert.id,
                name=sponsorship.concert.name,
                concert_date=sponsorship.concert.concert_date,
            ),
        )
