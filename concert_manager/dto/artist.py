from pydantic import Field

from concert_manager.dto import BaseSchema


class ArtistCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    genre: str = Field(min_length=1, max_length=100)
    contact_info: str = Field(min_length=1, max_length=255)
    availability: str | None = None
    social_media_link: str | None = None
    manager_id: int | None = None

class ArtistManager(BaseSchema):
    manager_id: int
    name: str
    role: str

class Artist(BaseSchema):
    artist_id: int
    name: str
    genre: str
    contact_info: str
    availability: str | None = None
    social_media_link: str | None = None
    manager: ArtistManager | None = None

    @classmethod
    def from_entity(cls, artist) -> "Artist":
        manager = None
        if artist.manager is not None:
            manager = ArtistManager(
                manager_id=artist.manager.id,
                name=artist.manager.name,
                role=artist.manager.role,
            )
        return cls(
            artist_id=artist.id,
            name=artist.name,
            genre=artist.genre,
            contact_info=artist.contact_info,
            availability=artist.availability,
            social_media_link=artist.social_media_link,
            manager=manager,
        )
