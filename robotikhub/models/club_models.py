"""
SQLAlchemy Models untuk kegiatan, absensi, galeri, materi belajar dan prestasi
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from robotikhub.database import Base
from robotikhub.shaping import public_url, format_date

ACTIVITY_COMING = "COMING"
ACTIVITY_COMPLETED = "COMPLETED"

ATTENDANCE_PRESENT = "PRESENT"
ATTENDANCE_ABSENT = "ABSENT"

MATERIAL_PDF = "PDF"
MATERIAL_VIDEO = "VIDEO"


class Activity(Base):
    """Model untuk tabel activities (agenda kegiatan)"""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(String(32), nullable=False, index=True)  # YYYY-MM-DD atau YYYY-MM-DDTHH:MM
    status = Column(String(10), nullable=False, default=ACTIVITY_COMING)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description or "",
            "date": self.date,
            "status": self.status
        }


class AttendanceRecord(Base):
    """Model untuk tabel attendance_records"""
    __tablename__ = "attendance_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    activity_id = Column(Integer, ForeignKey("activities.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(10), nullable=False, default=ATTENDANCE_PRESENT)
    date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User")
    activity = relationship("Activity")

    def to_dict(self):
        return {
            "id": str(self.id),
            "memberName": self.user.name if self.user else "Guest",
            "activityName": self.activity.title if self.activity else "Kegiatan",
            "activityId": str(self.activity_id),
            "date": format_date(self.date or self.created_at),
            "status": self.status
        }


class GalleryPhoto(Base):
    """Model untuk tabel gallery_photos"""
    __tablename__ = "gallery_photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    image_path = Column(String(255), nullable=False)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "title": self.title,
            "url": public_url(self.image_path)
        }


class LearningMaterial(Base):
    """Model untuk tabel learning_materials; file_path XOR external_url"""
    __tablename__ = "learning_materials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    type = Column(String(10), nullable=False, default=MATERIAL_PDF)
    file_path = Column(String(255), nullable=True)
    external_url = Column(String(1024), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "title": self.title,
            "type": self.type,
            "url": self.external_url or public_url(self.file_path) or ""
        }


class Achievement(Base):
    """Model untuk tabel achievements (prestasi klub)"""
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    year = Column(String(10), nullable=False)
    description = Column(Text, nullable=True)
    photo_path = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "title": self.title,
            "year": self.year,
            "description": self.description or "",
            "photoUrl": public_url(self.photo_path)
        }
