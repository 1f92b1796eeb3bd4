"""
API Routes untuk Prestasi Klub
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from robotikhub.api.auth_routes import get_current_user, require_admin
from robotikhub.api.profile_routes import parse_optional_id
from robotikhub.services.achievement_service import achievement_service
from robotikhub.services.upload_service import upload_service

router = APIRouter(prefix="/api/achievements", tags=["Achievements"])


@router.get("", summary="Get Achievements")
async def get_achievements(current_user: dict = Depends(get_current_user)):
    return achievement_service.get_all()


@router.post("", summary="Upsert Achievement")
async def save_achievement(
    record_id: Optional[str] = Form(None, alias="id"),
    title: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    current_user: dict = Depends(require_admin)
):
    """
    Tambah atau update prestasi (admin).

    - **title**, **year**: wajib
    - **id**: opsional; jika ada dan ditemukan, update di tempat
    - **photo**: opsional; foto lama diganti hanya jika ada file baru
    """
    content = await upload_service.read_upload(photo)
    data, created = achievement_service.save(
        achievement_id=parse_optional_id(record_id, "id"),
        title=title,
        year=year,
        description=description,
        content=content,
        filename=photo.filename if photo else None,
        created_by=current_user["id"]
    )
    return JSONResponse(status_code=201 if created else 200, content=data)


@router.delete("/{achievement_id}", summary="Delete Achievement")
async def delete_achievement(achievement_id: int, current_user: dict = Depends(require_admin)):
    """Hapus prestasi beserta fotonya"""
    return achievement_service.delete(achievement_id)
