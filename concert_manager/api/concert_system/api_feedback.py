from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.feedback_repository import feedback_repository
from concert_manager.dto import feedback as feedback_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError
import logging

router = APIRouter(prefix="/feedback", tags=["feedback"])

logger = logging.getLogger(__name__)


@router.get("/concert/{concert_id}", response_model=list[feedback_schemas.Feedback])
def read_concert_feedback(concert_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [feedback_schemas.Feedback.from_entity(f) for f in feedback_repository.get_by_concert(concert_id)]
    except Exception as e:
        logger.error(f"Error retrieving feedback: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve feedback")

@router.post("", response_model=feedback_schemas.Feedback, status_code=201)
def create_feedback(feedback: feedback_schemas.FeedbackCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = feedback_repository.create(feedback)
        logger.info(f"Feedback {result.id} submitted for concert {result.concert_id}")
        return feedback_schemas.Feedback.from_entity(result)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Feedback submission error: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit feedback")

@router.delete("/{feedback_id}", response_model=MessageResponse)
def delete_feedback(feedback_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        feedback_repository.delete(feedback_id)
        return MessageResponse(message="Feedback deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Feedback deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete feedback")
