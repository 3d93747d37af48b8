import logging
import concert_manager.entities  # noqa: F401
from concert_manager.utils.config import settings
from concert_manager.utils.database import Base, engine, SessionLocal, db_session_context
from concert_manager.repositories.admin_repository import admin_repository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def init_database():
    """Initialize the database by creating all tables."""
    try:
        logger.info("Starting database initialization...")

        # concert_manager.entities registers every mapped class on Base
        Base.metadata.create_all(bind=engine)

        logger.info("Database tables created successfully!")

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def seed_admin(username: str | None = None, password: str | None = None):
    username = username or settings.ADMIN_USERNAME
    password = password or settings.ADMIN_PASSWORD
    if not username or not password:
        logger.info("ADMIN_USERNAME/ADMIN_PASSWORD not set, skipping admin seed")
        return None

    db = SessionLocal()
    try:
        db_session_context.set(db)
        admin = admin_repository.ensure_admin(username, password)
        logger.info(f"Admin user '{admin.username}' is available (id {admin.id})")
        return admin
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to seed admin user: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    init_database()
    seed_admin()
