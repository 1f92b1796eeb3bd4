"""
API Routes untuk Galeri Foto
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile

from robotikhub.api.auth_routes import get_current_user, require_admin
from robotikhub.services.gallery_service import gallery_service
from robotikhub.services.upload_service import upload_service

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


@router.get("", summary="Get Gallery")
async def get_gallery(current_user: dict = Depends(get_current_user)):
    """Semua foto, terbaru dulu"""
    return gallery_service.get_all()


@router.post("", status_code=201, summary="Upload Foto")
async def create_photo(
    title: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    current_user: dict = Depends(require_admin)
):
    """
    Upload foto baru (admin).

    - **photo**: file gambar (wajib)
    - **title**: judul, default nama file
    """
    content = await upload_service.read_upload(photo)
    return gallery_service.create(
        title=title,
        content=content,
        filename=photo.filename if photo else None,
        created_by=current_user["id"]
    )


@router.delete("/{photo_id}", summary="Delete Foto")
async def delete_photo(photo_id: int, current_user: dict = Depends(require_admin)):
    """Hapus foto beserta file-nya"""
    return gallery_service.delete(photo_id)
