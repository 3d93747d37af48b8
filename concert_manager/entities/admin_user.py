from sqlalchemy import Column, Integer, String, Boolean, DateTime, Sequence
from concert_manager.utils.database import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, Sequence("admin_user_seq"), primary_key=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login_date = Column(DateTime)

    def __repr__(self):
        return f"<AdminUser(id={self.id}, username='{self.username}')>"
