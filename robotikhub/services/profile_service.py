"""
Club Profile Service - sejarah, visi, misi dan struktur organisasi
"""
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy.exc import SQLAlchemyError

from robotikhub.database import get_db_context
from robotikhub.exceptions import NotFoundError, StorageError, ValidationError
from robotikhub.models import ClubProfile, Mission, OrganizationMember, PROFILE_ID
from robotikhub.services.upload_service import upload_service

logger = logging.getLogger(__name__)


def build_tree(members: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Susun daftar datar (id, parentId) menjadi forest bersarang.

    Anggota dengan parentId yang tidak ada di daftar diperlakukan sebagai root.
    """
    nodes = {m["id"]: {**m, "children": []} for m in members}
    roots = []
    for member in members:
        node = nodes[member["id"]]
        parent = nodes.get(member.get("parentId"))
        if parent is not None and parent is not node:
            parent["children"].append(node)
        else:
            roots.append(node)
    return roots


class ProfileService:

    def _get_or_create_profile(self, db) -> ClubProfile:
        profile = db.get(ClubProfile, PROFILE_ID)
        if profile is None:
            profile = ClubProfile(id=PROFILE_ID, history="", vision="")
            db.add(profile)
            db.flush()
        return profile

    def _profile_dict(self, profile: ClubProfile) -> Dict[str, Any]:
        return {
            "history": profile.history or "",
            "vision": profile.vision or "",
            "mission": [m.text for m in profile.missions]
        }

    def get_profile(self) -> Dict[str, Any]:
        with get_db_context() as db:
            profile = self._get_or_create_profile(db)
            db.commit()
            result = self._profile_dict(profile)
            result["structure"] = self.get_structure(db)
            return result

    def get_structure(self, db=None) -> List[Dict[str, Any]]:
        if db is None:
            with get_db_context() as session:
                return self.get_structure(session)
        members = (
            db.query(OrganizationMember)
            .filter(OrganizationMember.profile_id == PROFILE_ID)
            .order_by(OrganizationMember.id)
            .all()
        )
        return [m.to_dict() for m in members]

    def get_tree(self) -> List[Dict[str, Any]]:
        return build_tree(self.get_structure())

    def update_profile(self, history: Optional[str] = None, vision: Optional[str] = None, mission: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Update sejarah/visi di tempat; daftar misi diganti seluruhnya
        (hapus lalu insert ulang dengan posisi 0..n-1).
        """
        with get_db_context() as db:
            try:
                profile = self._get_or_create_profile(db)
                if history is not None:
                    profile.history = history
                if vision is not None:
                    profile.vision = vision
                if mission is not None:
                    db.query(Mission).filter(Mission.profile_id == PROFILE_ID).delete(synchronize_session=False)
                    for position, text in enumerate(mission):
                        db.add(Mission(profile_id=PROFILE_ID, position=position, text=text or ""))
                db.commit()
                db.expire_all()
                return self._profile_dict(db.get(ClubProfile, PROFILE_ID))
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Profile update failed: {e}")
                raise StorageError() from e

    def _validate_parent(self, db, member_id: Optional[int], parent_id: Optional[int]):
        """Parent harus ada, bukan diri sendiri, dan tidak membentuk siklus"""
        if parent_id is None:
            return
        if member_id is not None and parent_id == member_id:
            raise ValidationError("Anggota tidak bisa menjadi atasan dirinya sendiri.")
        parents = dict(db.query(OrganizationMember.id, OrganizationMember.parent_id).all())
        if parent_id not in parents:
            raise ValidationError("Atasan tidak ditemukan.")
        if member_id is None:
            return
        seen = set()
        current = parent_id
        while current is not None and current not in seen:
            if current == member_id:
                raise ValidationError("Struktur organisasi tidak boleh membentuk siklus.")
            seen.add(current)
            current = parents.get(current)

    def save_member(
        self,
        member_id: Optional[int],
        name: str,
        role: str,
        parent_id: Optional[int] = None,
        content: Optional[bytes] = None,
        filename: Optional[str] = None
    ) -> tuple:
        """
        Upsert anggota struktur berdasarkan id opsional.

        Returns (data, created). Foto hanya diganti jika ada file baru.
        """
        if not name or not name.strip() or not role or not role.strip():
            raise ValidationError("Nama dan jabatan wajib.")

        with get_db_context() as db:
            existing = db.get(OrganizationMember, member_id) if member_id else None
            self._validate_parent(db, existing.id if existing else None, parent_id)

            photo_path = upload_service.save(content, filename) if content else None
            old_photo = None
            try:
                if existing:
                    existing.name = name.strip()
                    existing.role = role.strip()
                    existing.parent_id = parent_id
                    if photo_path:
                        old_photo = existing.photo_path
                        existing.photo_path = photo_path
                    member = existing
                else:
                    self._get_or_create_profile(db)
                    member = OrganizationMember(
                        profile_id=PROFILE_ID,
                        name=name.strip(),
                        role=role.strip(),
                        parent_id=parent_id,
                        photo_path=photo_path
                    )
                    db.add(member)
                db.commit()
                db.refresh(member)
            except SQLAlchemyError as e:
                db.rollback()
                upload_service.delete(photo_path)
                logger.error(f"Organization member save failed: {e}")
                raise StorageError() from e

            upload_service.delete(old_photo)
            return member.to_dict(), existing is None

    def delete_member(self, member_id: int) -> Dict[str, Any]:
        """Hapus anggota; bawahan langsung menjadi root"""
        with get_db_context() as db:
            member = db.get(OrganizationMember, member_id)
            if not member:
                raise NotFoundError()
            photo_path = member.photo_path
            try:
                db.query(OrganizationMember).filter(
                    OrganizationMember.parent_id == member_id
                ).update({OrganizationMember.parent_id: None}, synchronize_session=False)
                db.delete(member)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Organization member delete failed for {member_id}: {e}")
                raise StorageError() from e

        upload_service.delete(photo_path)
        return {"ok": True}


profile_service = ProfileService()
