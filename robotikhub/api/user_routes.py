"""
API Routes untuk daftar anggota dan avatar
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile

from robotikhub.api.auth_routes import get_current_user
from robotikhub.services.user_service import user_service
from robotikhub.services.upload_service import upload_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", summary="Get All Users")
async def get_users(current_user: dict = Depends(get_current_user)):
    """Daftar semua anggota (untuk dashboard)"""
    return user_service.get_all()


@router.patch("/me", summary="Update Avatar")
async def update_me(
    avatar: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user)
):
    """Ganti avatar milik sendiri (multipart, field `avatar`)"""
    content = await upload_service.read_upload(avatar)
    return user_service.update_avatar(
        current_user["id"],
        content,
        avatar.filename if avatar else None
    )
