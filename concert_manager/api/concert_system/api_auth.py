from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.attendee_repository import attendee_repository
from concert_manager.dto import auth as auth_schemas
from concert_manager.utils.exceptions import ConflictError
import logging

router = APIRouter(tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=auth_schemas.RegisteredAttendee, status_code=201)
def register(attendee: auth_schemas.AttendeeRegister, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = attendee_repository.register(attendee)
        return auth_schemas.RegisteredAttendee(id=result.id, name=result.name, contact_info=result.contact_info)
    except ConflictError as e:
        logger.info(f"Registration rejected: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error registering attendee: {e}")
        raise HTTPException(status_code=500, detail="Failed to register attendee")

@router.post("/login", response_model=auth_schemas.AttendeeLoginResponse)
def login(credentials: auth_schemas.AttendeeLogin, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        attendee = attendee_repository.authenticate(credentials.contact_info, credentials.password)
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Login failed")

    if not attendee:
        logger.warning("Invalid attendee credentials")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return auth_schemas.AttendeeLoginResponse(
        message="Login successful",
        attendee=auth_schemas.AttendeeProfile(
            id=attendee.id,
            name=attendee.name,
            contact_info=attendee.contact_info,
            loyalty_points=attendee.loyalty_points,
        ),
    )
