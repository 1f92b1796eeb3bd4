"""
Gallery Service - foto kegiatan klub
"""
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy.exc import SQLAlchemyError

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError, ValidationError
from robotikhub.models import GalleryPhoto
from robotikhub.services.upload_service import upload_service, title_from

logger = logging.getLogger(__name__)


class GalleryService:

    def get_all(self) -> List[Dict[str, Any]]:
        with get_db_context() as db:
            photos = db.query(GalleryPhoto).order_by(GalleryPhoto.id.desc()).all()
            return [p.to_dict() for p in photos]

    def create(self, title: Optional[str], content: Optional[bytes], filename: Optional[str], created_by: int) -> Dict[str, Any]:
        if not content:
            raise ValidationError("File foto wajib.")

        image_path = upload_service.save(content, filename)
        with get_db_context() as db:
            try:
                photo = GalleryPhoto(
                    title=title_from(title, filename, "Foto"),
                    image_path=image_path,
                    created_by=created_by
                )
                db.add(photo)
                db.commit()
                db.refresh(photo)
                return photo.to_dict()
            except SQLAlchemyError as e:
                db.rollback()
                upload_service.delete(image_path)
                logger.error(f"Gallery insert failed: {e}")
                raise StorageError() from e

    def delete(self, photo_id: int) -> Dict[str, Any]:
        """Hapus baris lalu file-nya; gagal unlink tidak menggagalkan delete"""
        with get_db_context() as db:
            photo = db.get(GalleryPhoto, photo_id)
            if not photo:
                raise NotFoundError()
            image_path = photo.image_path
            try:
                db.delete(photo)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Gallery delete failed for {photo_id}: {e}")
                raise StorageError() from e

        upload_service.delete(image_path)
        return {"ok": True}


gallery_service = GalleryService()
