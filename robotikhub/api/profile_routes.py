"""
API Routes untuk Profil Klub dan Struktur Organisasi
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from robotikhub.api.auth_routes import get_current_user, require_admin
from robotikhub.exceptions import ValidationError
from robotikhub.schemas import ProfileUpdate
from robotikhub.services.profile_service import profile_service
from robotikhub.services.upload_service import upload_service

router = APIRouter(prefix="/api/profile", tags=["Club Profile"])


def parse_optional_id(value: Optional[str], field: str) -> Optional[int]:
    """Form field id opsional: kosong -> None, selain angka -> 400"""
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} tidak valid.")


@router.get("", summary="Get Club Profile")
async def get_profile(current_user: dict = Depends(get_current_user)):
    """Sejarah, visi, misi (urut) dan struktur organisasi (datar)"""
    return profile_service.get_profile()


@router.patch("", summary="Update Club Profile")
async def update_profile(data: ProfileUpdate, current_user: dict = Depends(require_admin)):
    """
    Update profil (admin).

    `mission` mengganti seluruh daftar misi, bukan patch per item.
    """
    return profile_service.update_profile(
        history=data.history,
        vision=data.vision,
        mission=data.mission
    )


@router.get("/structure/tree", summary="Get Organization Chart")
async def get_structure_tree(current_user: dict = Depends(get_current_user)):
    """Struktur organisasi sebagai forest bersarang (children)"""
    return profile_service.get_tree()


@router.post("/structure", summary="Upsert Organization Member")
async def save_structure_member(
    record_id: Optional[str] = Form(None, alias="id"),
    name: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    parent_id: Optional[str] = Form(None, alias="parentId"),
    photo: Optional[UploadFile] = File(None),
    current_user: dict = Depends(require_admin)
):
    """
    Tambah atau update anggota struktur (admin).

    Jika `id` dikirim dan ada, baris di-update (foto diganti hanya bila ada
    file baru); selain itu insert baru (201).
    """
    content = await upload_service.read_upload(photo)
    data, created = profile_service.save_member(
        member_id=parse_optional_id(record_id, "id"),
        name=name,
        role=role,
        parent_id=parse_optional_id(parent_id, "parentId"),
        content=content,
        filename=photo.filename if photo else None
    )
    return JSONResponse(status_code=201 if created else 200, content=data)


@router.delete("/structure/{member_id}", summary="Delete Organization Member")
async def delete_structure_member(member_id: int, current_user: dict = Depends(require_admin)):
    """Hapus anggota struktur; bawahan langsung menjadi root"""
    return profile_service.delete_member(member_id)
