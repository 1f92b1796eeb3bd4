"""
SQLAlchemy Model untuk user (anggota dan admin)
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from robotikhub.database import Base
from robotikhub.shaping import public_url

ROLE_ADMIN = "ADMIN"
ROLE_MEMBER = "ANGGOTA"


class User(Base):
    """Model untuk tabel users"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(10), nullable=False, default=ROLE_MEMBER, index=True)
    avatar_path = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def to_dict(self):
        """Public user record, tanpa password hash"""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "avatar": public_url(self.avatar_path)
        }
