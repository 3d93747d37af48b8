from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.venue_repository import venue_repository
from concert_manager.dto import venue as venue_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError, ConflictError
import logging

router = APIRouter(prefix="/venues", tags=["venues"])

logger = logging.getLogger(__name__)

@router.get("", response_model=list[venue_schemas.Venue])
def read_venues(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [venue_schemas.Venue.from_entity(v) for v in venue_repository.list_all()]
    except Exception as e:
        logger.error(f"Error retrieving venues: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve venues")

@router.post("", response_model=venue_schemas.Venue, status_code=201)
def create_venue(venue: venue_schemas.VenueCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = venue_repository.create(venue)
        logger.info(f"Venue created with id {result.id}")
        return venue_schemas.Venue.from_entity(result)
    except Exception as e:
        logger.error(f"Error creating venue: {e}")
        raise HTTPException(status_code=500, detail="Failed to create venue")

@router.delete("/{venue_id}", response_model=MessageResponse)
def delete_venue(venue_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        venue_repository.delete(venue_id)
        logger.info(f"Venue {venue_id} deleted")
        return MessageResponse(message="Venue deleted successfully")
    except NotFoundError as e:
        logger.error("Venue not found")
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Venue deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete venue")
