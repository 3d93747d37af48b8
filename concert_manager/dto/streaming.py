from datetime import date

from pydantic import Field

from concert_manager.dto import BaseSchema


class StreamingPlatformCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1, max_length=500)
    streaming_date: date

class StreamingPlatformUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = Field(default=None, min_length=1, max_length=500)
    streaming_date: date | None = None

class StreamingPlatform(BaseSchema):
    platform_id: int
    name: str
    url: str
    streaming_date: date

    @classmethod
    def from_entity(cls, platform) -> "StreamingPlatform":
        return cls(
            platform_id=platform.id,
            name=platform.name,
            url=platform.url,
            streaming_date=platform.streaming_date,
        )
