"""
Achievement Service - prestasi klub
"""
import logging
from typing import Optional, List, Dict, Any, Tuple
from sqlalchemy.exc import SQLAlchemyError

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError, ValidationError
from robotikhub.models import Achievement
from robotikhub.services.upload_service import upload_service

logger = logging.getLogger(__name__)


class AchievementService:

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            achievements = db.query(Achievement).order_by(Achievement.id.desc()).all()
            return [a.to_dict() for a in achievements]

    def save(
        self,
        achievement_id: Optional[int],
        title: str,
        year: str,
        description: Optional[str],
        content: Optional[bytes],
        filename: Optional[str],
        created_by: int
    ) -> Tuple[Dict[str, Any], bool]:
        """Upsert by id opsional; returns (data, created)"""
        if not title or not title.strip() or not year or not str(year).strip():
            raise ValidationError("Judul dan tahun wajib.")

        with get_db_context() as db:
            existing = db.get(Achievement, achievement_id) if achievement_id else None
            photo_path = upload_service.save(content, filename) if content else None
            old_photo = None
            try:
                if existing:
                    existing.title = title.strip()
                    existing.year = str(year).strip()
                    existing.description = description or ""
                    if photo_path:
                        old_photo = existing.photo_path
                        existing.photo_path = photo_path
                    achievement = existing
                else:
                    achievement = Achievement(
                        title=title.strip(),
                        year=str(year).strip(),
                        description=description or "",
                        photo_path=photo_path,
                        created_by=created_by
                    )
                    db.add(achievement)
                db.commit()
                db.refresh(achievement)
            except SQLAlchemyError as e:
                db.rollback()
                upload_service.delete(photo_path)
                logger.error(f"Achievement save failed: {e}")
                raise StorageError() from e

            upload_service.delete(old_photo)
            return achievement.to_dict(), existing is None

    def delete(self, achievement_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            achievement = db.get(Achievement, achievement_id)
            if not achievement:
                raise NotFoundError()
            photo_path = achievement.photo_path
            try:
                db.delete(achievement)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Achievement delete failed for {achievement_id}: {e}")
                raise StorageError() from e

        upload_service.delete(photo_path)
        return {"ok": True}


achievement_service = AchievementService()
