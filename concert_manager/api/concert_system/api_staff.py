from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.staff_repository import staff_repository
from concert_manager.dto import staff as staff_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError, ConflictError
import logging

router = APIRouter(prefix="/staff", tags=["staff"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[staff_schemas.Staff])
def read_staff(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [staff_schemas.Staff.from_entity(s) for s in staff_repository.list_all()]
    except Exception as e:
        logger.error(f"Error retrieving staff list: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve staff list")

@router.post("", response_model=staff_schemas.Staff, status_code=201)
def create_staff(staff: staff_schemas.StaffCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = staff_repository.create(staff)
        logger.info(f"Staff member created with id {result.id}")
        return staff_schemas.Staff.from_entity(result)
    except Exception as e:
        logger.error(f"Staff creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create staff member")

@router.delete("/{staff_id}", response_model=MessageResponse)
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        staff_repository.delete(staff_id)
        return MessageResponse(message="Staff member deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Staff deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete staff member")
