from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.ticket_repository import ticket_repository
from concert_manager.dto import ticket as ticket_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError
import logging

router = APIRouter(prefix="/tickets", tags=["tickets"])

logger = logging.getLogger(__name__)

@router.post("", response_model=ticket_schemas.Ticket, status_code=201)
def create_ticket(ticket: ticket_schemas.TicketCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = ticket_repository.create(ticket)
        logger.info(f"Ticket created with id {result.id}")
        return ticket_schemas.Ticket.from_entity(result)
    except NotFoundError as e:
        logger.error(f"Ticket purchase rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        logger.error(f"Validation error creating ticket: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error creating ticket: {e}")
        raise HTTPException(status_code=500, detail="Failed to create ticket")

@router.get("/attendee/{attendee_id}", response_model=list[ticket_schemas.Ticket])
def read_attendee_tickets(attendee_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [ticket_schemas.Ticket.from_entity(t) for t in ticket_repository.get_by_attendee(attendee_id)]
    except Exception as e:
        logger.error(f"Error retrieving tickets for attendee {attendee_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tickets")

@router.get("/concert/{concert_id}/attendee/{attendee_id}", response_model=ticket_schemas.Ticket)
def read_ticket_for_concert(concert_id: int, attendee_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        ticket = ticket_repository.get_by_concert_and_attendee(concert_id, attendee_id)
        return ticket_schemas.Ticket.from_entity(ticket)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error retrieving ticket: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve ticket")

@router.delete("/{ticket_id}", response_model=MessageResponse)
def delete_ticket(ticket_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        ticket_repository.delete(ticket_id)
        logger.info(f"Ticket {ticket_id} deleted")
        return MessageResponse(message="Ticket deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Ticket deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete ticket")
