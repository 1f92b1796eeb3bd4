"""
API Routes untuk Materi Belajar
"""
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as SchemaError
from starlette.datastructures import UploadFile

from robotikhub.api.auth_routes import get_current_user, require_admin
from robotikhub.exceptions import ValidationError
from robotikhub.schemas import LearningLinkCreate
from robotikhub.services.learning_service import learning_service
from robotikhub.services.upload_service import upload_service

router = APIRouter(prefix="/api/learning", tags=["Learning"])


@router.get("", summary="Get Learning Materials")
async def get_materials(current_user: dict = Depends(get_current_user)):
    """Semua materi, terbaru dulu"""
    return learning_service.get_all()


@router.post("", status_code=201, summary="Create Learning Material")
async def create_material(request: Request, current_user: dict = Depends(require_admin)):
    """
    Tambah materi (admin).

    Terima multipart (`file`, `title`, `type`, `url`) atau JSON
    `{title, type, url}`. Jika file dan url dikirim bersamaan, file dipakai.
    """
    content_type = request.headers.get("content-type", "")
    content = None
    filename = None
    file_content_type = None

    if content_type.startswith("application/json"):
        try:
            data = LearningLinkCreate.model_validate(await request.json())
        except (ValueError, SchemaError):
            raise ValidationError("Body JSON tidak valid.")
        title, material_type, url = data.title, data.type, data.url
    else:
        form = await request.form()
        title = form.get("title")
        material_type = form.get("type")
        url = form.get("url")
        upload = form.get("file")
        if isinstance(upload, UploadFile):
            content = await upload_service.read_upload(upload)
            filename = upload.filename
            file_content_type = upload.content_type

    return learning_service.create(
        title=title if isinstance(title, str) else None,
        material_type=material_type if isinstance(material_type, str) else None,
        url=url if isinstance(url, str) else None,
        content=content,
        filename=filename,
        content_type=file_content_type,
        created_by=current_user["id"]
    )


@router.delete("/{material_id}", summary="Delete Learning Material")
async def delete_material(material_id: int, current_user: dict = Depends(require_admin)):
    """Hapus materi; file upload ikut dihapus jika ada"""
    return learning_service.delete(material_id)
