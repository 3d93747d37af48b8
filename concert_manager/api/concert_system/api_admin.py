from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from concert_manager.utils.database import get_db, db_session_context
from concert_manager.repositories.admin_repository import admin_repository
from concert_manager.dto import auth as auth_schemas
import logging

router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


@router.post("/login", response_model=auth_schemas.AdminLoginResponse)
def admin_login(credentials: auth_schemas.AdminLogin, db: Session = Depends(get_db)):
    db_session_context.set(db)
    try:
        admin = admin_repository.authenticate(credentials.username, credentials.password)
    except Exception as e:
        logger.error(f"Admin login error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if not admin:
        logger.warning(f"Invalid admin credentials for {credentials.username}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info(f"Admin {admin.id} logged in")
    return auth_schemas.AdminLoginResponse(admin_id=admin.id, username=admin.username)
