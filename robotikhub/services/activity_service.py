"""
Activity & Attendance Service - agenda kegiatan dan absensi
"""
import logging
from datetime import date, datetime
from typing import Optional, List, Dict, Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError, ValidationError
from robotikhub.models import Activity, AttendanceRecord
from robotikhub.models.club_models import ACTIVITY_COMING, ATTENDANCE_PRESENT

logger = logging.getLogger(__name__)


class ActivityService:

    def compose_date(self, day: str, time_of_day: Optional[str] = None) -> str:
        """Gabungkan tanggal dan jam opsional menjadi YYYY-MM-DDTHH:MM"""
        return f"{day}T{time_of_day}" if time_of_day else day

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            activities = db.query(Activity).order_by(Activity.date.desc(), Activity.id.desc()).all()
            return [a.to_dict() for a in activities]

    def create(self, title: str, day: str, time_of_day: Optional[str], description: Optional[str], created_by: int) -> Dict[str, Any]:
        if not title or not title.strip() or not day:
            raise ValidationError("Judul dan tanggal wajib.")

        with get_db_context() as db:
            try:
                activity = Activity(
                    title=title.strip(),
                    description=description or "",
                    date=self.compose_date(day, time_of_day),
                    status=ACTIVITY_COMING,
                    created_by=created_by
                )
                db.add(activity)
                db.commit()
                db.refresh(activity)
                return activity.to_dict()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Activity insert failed: {e}")
                raise StorageError() from e


class AttendanceService:

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            records = (
                db.query(AttendanceRecord)
                .options(joinedload(AttendanceRecord.user), joinedload(AttendanceRecord.activity))
                .order_by(AttendanceRecord.created_at.desc(), AttendanceRecord.id.desc())
                .all()
            )
            return [r.to_dict() for r in records]

    def check_in(self, user_id: int, activity_id: int, day: Optional[date] = None) -> Dict[str, Any]:
        """
        Absen mandiri untuk kegiatan.

        Status selalu PRESENT; tanggal memakai tanggal yang dikirim atau
        tanggal pembuatan record.
        """
        if not activity_id:
            raise ValidationError("Pilih kegiatan.")

        with get_db_context() as db:
            activity = db.get(Activity, activity_id)
            if not activity:
                raise NotFoundError("Kegiatan tidak ditemukan.")
            try:
                record = AttendanceRecord(
                    user_id=user_id,
                    activity_id=activity.id,
                    status=ATTENDANCE_PRESENT,
                    date=day or datetime.utcnow().date()
                )
                db.add(record)
                db.commit()
                db.refresh(record)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Attendance insert failed: {e}")
                raise StorageError() from e

            return record.to_dict()


activity_service = ActivityService()
attendance_service = AttendanceService()
