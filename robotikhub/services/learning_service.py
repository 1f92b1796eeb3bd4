"""
Learning Material Service - materi belajar (PDF / video), file atau link eksternal
"""
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy.exc import SQLAlchemyError

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError, ValidationError
from robotikhub.models import LearningMaterial
from robotikhub.models.club_models import MATERIAL_PDF, MATERIAL_VIDEO
from robotikhub.services.upload_service import upload_service, title_from

logger = logging.getLogger(__name__)


class LearningService:

    def resolve_type(self, requested: Optional[str], content_type: Optional[str] = None) -> str:
        """Tipe eksplisit jika valid, selain itu tebak dari content-type file"""
        requested = (requested or "").strip().upper()
        if requested in (MATERIAL_PDF, MATERIAL_VIDEO):
            return requested
        if content_type and content_type.lower().startswith("video/"):
            return MATERIAL_VIDEO
        return MATERIAL_PDF

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            materials = db.query(LearningMaterial).order_by(LearningMaterial.id.desc()).all()
            return [m.to_dict() for m in materials]

    def create(
        self,
        title: Optional[str],
        material_type: Optional[str],
        url: Optional[str],
        content: Optional[bytes] = None,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        created_by: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Tambah materi dari file upload atau URL eksternal.

        Tepat satu sumber disimpan; jika keduanya dikirim, file yang dipakai.
        """
        file_path = None
        external_url = None
        if content:
            file_path = upload_service.save(content, filename)
        elif url and url.strip():
            external_url = url.strip()
        else:
            raise ValidationError("Berikan file atau URL link.")

        with get_db_context() as db:
            try:
                material = LearningMaterial(
                    title=title_from(title, filename if file_path else None, "Materi"),
                    type=self.resolve_type(material_type, content_type if file_path else None),
                    file_path=file_path,
                    external_url=external_url,
                    created_by=created_by
                )
                db.add(material)
                db.commit()
                db.refresh(material)
                return material.to_dict()
            except SQLAlchemyError as e:
                db.rollback()
                upload_service.delete(file_path)
                logger.error(f"Learning material insert failed: {e}")
                raise StorageError() from e

    def delete(self, material_id: int) -> Dict[str, Any]:
        with get_db_context() as db:
            material = db.get(LearningMaterial, material_id)
            if not material:
                raise NotFoundError()
            file_path = material.file_path
            try:
                db.delete(material)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Learning material delete failed for {material_id}: {e}")
                raise StorageError() from e

        upload_service.delete(file_path)
        return {"ok": True}


learning_service = LearningService()
