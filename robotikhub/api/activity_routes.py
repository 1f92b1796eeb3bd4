"""
API Routes untuk Agenda Kegiatan dan Absensi
"""
from fastapi import APIRouter, Depends

from robotikhub.api.auth_routes import get_current_user, require_admin
from robotikhub.exceptions import ValidationError
from robotikhub.schemas import ActivityCreate, AttendanceCreate
from robotikhub.services.activity_service import activity_service, attendance_service

router = APIRouter(prefix="/api", tags=["Activities"])


@router.get("/activities", summary="Get Activities")
async def get_activities(current_user: dict = Depends(get_current_user)):
    """Semua kegiatan, tanggal terbaru dulu"""
    return activity_service.get_all()


@router.post("/activities", status_code=201, summary="Create Activity")
async def create_activity(data: ActivityCreate, current_user: dict = Depends(require_admin)):
    """
    Tambah kegiatan baru (admin).

    - **title**, **date**: wajib
    - **time**: opsional (HH:MM), digabung menjadi YYYY-MM-DDTHH:MM
    """
    if data.day is None:
        raise ValidationError("Judul dan tanggal wajib.")
    return activity_service.create(
        title=data.title,
        day=data.day.isoformat(),
        time_of_day=data.time,
        description=data.description,
        created_by=current_user["id"]
    )


@router.get("/attendance", summary="Get Attendance Records")
async def get_attendance(current_user: dict = Depends(get_current_user)):
    """Semua record absensi, terbaru dulu"""
    return attendance_service.get_all()


@router.post("/attendance", status_code=201, summary="Check In")
async def create_attendance(data: AttendanceCreate, current_user: dict = Depends(get_current_user)):
    """Absen mandiri untuk sebuah kegiatan; status selalu PRESENT"""
    return attendance_service.check_in(
        user_id=current_user["id"],
        activity_id=data.activity_id,
        day=data.day
    )
