from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.artist_repository import artist_repository
from concert_manager.dto import artist as artist_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError, ConflictError
import logging

router = APIRouter(prefix="/artists", tags=["artists"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[artist_schemas.Artist])
def read_artists(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [artist_schemas.Artist.from_entity(a) for a in artist_repository.list_all()]
    except Exception as e:
        logger.error(f"Error retrieving artists: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve artists")

@router.post("", response_model=artist_schemas.Artist, status_code=201)
def create_artist(artist: artist_schemas.ArtistCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = artist_repository.create(artist)
        logger.info(f"Artist created with id {result.id}")
        return artist_schemas.Artist.from_entity(result)
    except NotFoundError as e:
        logger.error(f"Artist creation rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Artist creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create artist")

@router.delete("/{artist_id}", response_model=MessageResponse)
def delete_artist(artist_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        artist_repository.delete(artist_id)
        return MessageResponse(message="Artist deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Artist deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete artist")
