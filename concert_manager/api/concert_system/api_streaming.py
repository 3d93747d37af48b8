from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.streaming_repository import streaming_repository
from concert_manager.dto import streaming as streaming_schemas
from concert_manager.dto import MessageResponse
from concert_manager.utils.exceptions import NotFoundError
import logging

router = APIRouter(prefix="/streaming", tags=["streaming"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[streaming_schemas.StreamingPlatform])
def read_platforms(db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        return [streaming_schemas.StreamingPlatform.from_entity(p) for p in streaming_repository.list_all()]
    except Exception as e:
        logger.error(f"Error retrieving streaming platforms: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve streaming platforms")

@router.get("/{platform_id}", response_model=streaming_schemas.StreamingPlatform)
def read_platform(platform_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        platform = streaming_repository.get_existing(platform_id)
        return streaming_schemas.StreamingPlatform.from_entity(platform)
    except NotFoundError as e:
        logger.error("Streaming platform not found")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error retrieving streaming platform: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve streaming platform")

@router.post("", response_model=streaming_schemas.StreamingPlatform, status_code=201)
def create_platform(platform: streaming_schemas.StreamingPlatformCreate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = streaming_repository.create(platform)
        logger.info(f"Streaming platform created with id {result.id}")
        return streaming_schemas.StreamingPlatform.from_entity(result)
    except Exception as e:
        logger.error(f"Platform creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create streaming platform")

@router.put("/{platform_id}", response_model=streaming_schemas.StreamingPlatform)
def update_platform(platform_id: int, platform: streaming_schemas.StreamingPlatformUpdate, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        result = streaming_repository.update(platform_id, platform)
        return streaming_schemas.StreamingPlatform.from_entity(result)
    except NotFoundError as e:
        logger.error("Streaming platform not found for update")
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Platform update error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update streaming platform")

@router.delete("/{platform_id}", response_model=MessageResponse)
def delete_platform(platform_id: int, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        streaming_repository.delete(platform_id)
        return MessageResponse(message="Streaming platform deleted successfully")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Platform deletion error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete streaming platform")
