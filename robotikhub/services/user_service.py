"""
User Service - daftar anggota dan update avatar
"""
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy.exc import SQLAlchemyError

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError
from robotikhub.models import User
from robotikhub.services.upload_service import upload_service

logger = logging.getLogger(__name__)


class UserService:

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            return [u.to_dict() for u in db.query(User).order_by(User.id).all()]

    def update_avatar(self, user_id: int, content: Optional[bytes], filename: Optional[str]) -> Dict[str, Any]:
        """Ganti avatar milik user sendiri; avatar lama dihapus best-effort"""
        with get_db_context() as db:
            user = db.get(User, user_id)
            if not user:
                raise NotFoundError("User tidak ditemukan")
            if not content:
                return user.to_dict()

            new_path = upload_service.save(content, filename)
            old_path = user.avatar_path
            try:
                user.avatar_path = new_path
                db.commit()
                db.refresh(user)
            except SQLAlchemyError as e:
                db.rollback()
                upload_service.delete(new_path)
                logger.error(f"Avatar update failed for user {user_id}: {e}")
                raise StorageError() from e

            upload_service.delete(old_path)
            return user.to_dict()


user_service = UserService()
