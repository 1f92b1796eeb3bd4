"""
Authentication Service - Register, Login, Token Management
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from passlib.context import CryptContext
from jose import JWTError, jwt
from sqlalchemy import String, DateTime, func, insert, literal, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from robotikhub.config import get_settings
from robotikhub.database import get_db_context
from robotikhub.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from robotikhub.models import User, ROLE_ADMIN, ROLE_MEMBER

settings = get_settings()
logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DUPLICATE_EMAIL_MESSAGE = "Email ini sudah terdaftar."
ADMIN_QUOTA_MESSAGE = "Kuota Admin penuh (Maksimal 3 Admin)."


class AuthService:
    """Service untuk authentication"""

    def hash_password(self, password: str) -> str:
        """Hash password dengan bcrypt"""
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verifikasi password"""
        return pwd_context.verify(plain_password, hashed_password)

    def normalize_email(self, email: str) -> str:
        return (email or "").strip().lower()

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Buat JWT access token (default berlaku 7 hari)"""
        to_encode = data.copy()
        if expires_delta is not None:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(days=settings.access_token_expire_days)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    def create_token_for(self, user: User) -> str:
        return self.create_access_token(data={"sub": str(user.id), "role": user.role})

    def decode_token(self, token: str) -> Optional[dict]:
        """Decode JWT token; None jika signature salah atau expired"""
        try:
            return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        except JWTError:
            return None

    def identity_from_token(self, token: str) -> Dict[str, Any]:
        """
        Ambil identitas (id dan role) dari payload token.

        Payload adalah satu-satunya sumber identitas; tidak ada session store.
        """
        payload = self.decode_token(token)
        if not payload:
            raise AuthorizationError("Invalid token")
        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            raise AuthorizationError("Invalid token")
        role = payload.get("role")
        if role not in (ROLE_ADMIN, ROLE_MEMBER):
            raise AuthorizationError("Invalid token")
        return {"id": user_id, "role": role}

    def register(self, name: str, email: str, password: str, role: Optional[str] = None) -> Dict[str, Any]:
        """
        Register user baru.

        Role selain ADMIN menjadi ANGGOTA. Kuota admin dicek dan di-insert
        dalam satu statement kondisional sehingga dua registrasi bersamaan
        tidak bisa melewati batas 3 admin.
        """
        name = (name or "").strip()
        email = self.normalize_email(email)
        if not name or not email or not password:
            raise ValidationError("Name, email, password required")
        role = ROLE_ADMIN if role == ROLE_ADMIN else ROLE_MEMBER

        with get_db_context() as db:
            # Kuota admin dicek sebelum email duplikat
            if role == ROLE_ADMIN and db.query(User).filter(User.role == ROLE_ADMIN).count() >= settings.max_admins:
                raise ConflictError(ADMIN_QUOTA_MESSAGE)
            if db.query(User).filter(User.email == email).first():
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

            password_hash = self.hash_password(password)
            try:
                if role == ROLE_ADMIN:
                    inserted = self._insert_admin_if_seat_free(db, name, email, password_hash)
                    if not inserted:
                        db.rollback()
                        raise ConflictError(ADMIN_QUOTA_MESSAGE)
                else:
                    db.add(User(name=name, email=email, password_hash=password_hash, role=role))
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Register failed for {email}: {e}")
                raise StorageError() from e

            user = db.query(User).filter(User.email == email).first()
            logger.info(f"Registered user {user.id} with role {user.role}")
            return user.to_dict()

    def _insert_admin_if_seat_free(self, db, name: str, email: str, password_hash: str) -> bool:
        """INSERT ... SELECT ... WHERE (jumlah admin) < kuota; True jika baris masuk"""
        admin_count = (
            select(func.count(User.id))
            .where(User.role == ROLE_ADMIN)
            .correlate(None)
            .scalar_subquery()
        )
        values = select(
            literal(name, String),
            literal(email, String),
            literal(password_hash, String),
            literal(ROLE_ADMIN, String),
            literal(datetime.utcnow(), DateTime),
        ).where(admin_count < settings.max_admins)
        stmt = insert(User).from_select(
            ["name", "email", "password_hash", "role", "created_at"], values
        )
        result = db.connection().execute(stmt)
        return result.rowcount > 0

    def count_admins(self) -> int:
        with get_db_context() as db:
            return db.query(User).filter(User.role == ROLE_ADMIN).count()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Login user dan return token; pesan error sama untuk email/password salah"""
        email = self.normalize_email(email)
        if not email or not password:
            raise ValidationError("Email dan password wajib.")

        with get_db_context() as db:
            user = db.query(User).filter(User.email == email).first()
            if not user or not self.verify_password(password, user.password_hash):
                raise AuthenticationError()

            return {
                "user": user.to_dict(),
                "token": self.create_token_for(user),
                "token_type": "bearer"
            }

    def get_user_by_id(self, user_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            user = db.get(User, user_id)
            if not user:
                raise NotFoundError("User tidak ditemukan")
            return user.to_dict()


# Global instance
auth_service = AuthService()
