from concert_manager.utils.database import db_session_context
from concert_manager.entities.streaming_platform import StreamingPlatform
from concert_manager.dto.streaming import StreamingPlatformCreate, StreamingPlatformUpdate
from concert_manager.repositories.base import BaseRepository


class StreamingRepository(BaseRepository[StreamingPlatform, StreamingPlatformCreate, StreamingPlatformUpdate]):
    def __init__(self):
        super().__init__(StreamingPlatform, "Streaming platform")

    def list_all(self) -> list[StreamingPlatform]:
        return self.list(self.model.streaming_date, self.model.id)

    def delete(self, id: int) -> StreamingPlatform:
        db = db_session_context.get()
        platform = self.get_existing(id)
        # the streaming reference on a concert is optional, so just detach it
        for concert in platform.concerts:
            concert.streaming_id = None
        db.delete(platform)
        db.commit()
        return platform

streaming_repository = StreamingRepository()
