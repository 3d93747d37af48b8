from datetime import datetime

from concert_manager.utils.database import db_session_context
from concert_manager.entities.admin_user import AdminUser
from concert_manager.utils.security import hash_password, verify_password


class AdminRepository:
    def __init__(self):
        self.model = AdminUser

    def authenticate(self, username: str, password: str) -> AdminUser | None:
        """Check credentials of an active admin and stamp the login time."""
        db = db_session_context.get()
        admin = db.query(self.model).filter(
            self.model.username == username,
            self.model.is_active.is_(True),
        ).first()
        if admin is None or not verify_password(password, admin.password):
            return None

        admin.last_login_date = datetime.now()
        db.commit()
        db.refresh(admin)
        return admin

    def ensure_admin(self, username: str, password: str) -> AdminUser:
        db = db_session_context.get()
        admin = db.query(self.model).filter(self.model.username == username).first()
        if admin is None:
            admin = self.model(username=username, password=hash_password(password), is_active=True)
            db.add(admin)
            db.commit()
            db.refresh(admin)
        return admin

admin_repository = AdminRepository()
