from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.sponsorship_repository import sponsorship_repository
from concert_manager.dto import sponsorship as sponsorship_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError
import logging

router = APIRouter(prefix="/sponsorships", tags=["sponsorships"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[sponsorship_schemas.Sponsorship])
def read_sponsorships(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [sponsorship_schemas.Sponsorship.from_entity(s) for s in sponsorship_repository.list_all()]
    except Exception as e:
        logger.error(f"Error retrieving sponsorships: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve sponsorships")

@router.get("/concert/{concert_id}", response_model=list[sponsorship_schemas.Sponsorship])
def read_concert_sponsorships(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        sponsorships = sponsorship_repository.get_by_concert(concert_id)
        return [sponsorship_schemas.Sponsorship.from_entity(s) for s in sponsorships]
    except Exception as e:
        logger.error(f"Error retrieving sponsorships for concert {concert_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve sponsorships")

@router.post("", response_model=sponsorship_schemas.Sponsorship, status_code=201)
def create_sponsorship(sponsorship: sponsorship_schemas.SponsorshipCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = sponsorship_repository.create(sponsorship)
        logger.info(f"Sponsorship {result.id} added to concert {result.concert_id}")
        return sponsorship_schemas.Sponsorship.from_entity(result)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Sponsorship creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create sponsorship")

@router.delete("/{sponsor_id}", response_model=MessageResponse)
def delete_sponsorship(sponsor_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        sponsorship_repository.delete(sponsor_id)
        return MessageResponse(message="Sponsorship deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Sponsorship deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete sponsorship")
