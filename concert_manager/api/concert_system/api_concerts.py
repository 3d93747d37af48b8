from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.concert_repository import concert_repository
from concert_manager.dto import concert as concert_schemas
from concert_manager.dto import dashboard as dashboard_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError, ConflictError
import logging

router = APIRouter(prefix="/concerts", tags=["concerts"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[concert_schemas.Concert])
def read_concerts(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return concert_repository.list_details()
    except Exception as e:
        logger.error(f"Error retrieving concerts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve concerts")

@router.get("/attendee/{attendee_id}/dashboard", response_model=dashboard_schemas.AttendeeDashboard)
def read_attendee_dashboard(attendee_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return concert_repository.attendee_dashboard(attendee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error building dashboard for attendee {attendee_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve dashboard")

@router.get("/{concert_id}", response_model=concert_schemas.Concert)
def read_concert(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return concert_repository.get_detail(concert_id)
    except NotFoundError as e:
        logger.error(f"Concert {concert_id} not found")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error retrieving concert: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve concert")

@router.post("", response_model=concert_schemas.Concert, status_code=201)
def create_concert(concert: concert_schemas.ConcertCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = concert_repository.create(concert)
        logger.info(f"Concert created with id {result.id}")
        return result
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        logger.error(f"Validation error creating concert: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error creating concert: {e}")
        raise HTTPException(status_code=500, detail="Failed to create concert")

@router.put("/{concert_id}", response_model=concert_schemas.Concert)
def update_concert(concert_id: int, concert: concert_schemas.ConcertUpdate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = concert_repository.update(concert_id, concert)
        logger.info(f"Concert {concert_id} updated")
        return result
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating concert: {e}")
        raise HTTPException(status_code=500, detail="Failed to update concert")

@router.delete("/{concert_id}", response_model=MessageResponse)
def delete_concert(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        message = concert_repository.delete(concert_id)
        logger.info(message)
        return MessageResponse(message=message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting concert: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete concert")

@router.get("/{concert_id}/revenue", response_model=concert_schemas.ConcertRevenue)
def read_concert_revenue(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return concert_repository.revenue(concert_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error calculating revenue: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate revenue")

@router.get("/{concert_id}/summary", response_model=concert_schemas.ConcertSummary)
def read_concert_summary(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return concert_repository.summary(concert_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error building concert summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve concert summary")

@router.put("/{concert_id}/price", response_model=concert_schemas.PriceUpdateResponse)
def update_concert_price(concert_id: int, update: concert_schemas.PriceUpdate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        message = concert_repository.update_price(concert_id, update.price_increase)
        logger.info(f"Concert {concert_id}: {message}")
        return concert_schemas.PriceUpdateResponse(message=message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Price update error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update price")
