"""
SQLAlchemy Models untuk profil klub, misi dan struktur organisasi
"""
from sqlalchemy import Column, Integer, String, ForeignKey, Text
from sqlalchemy.orm import relationship
from robotikhub.database import Base
from robotikhub.shaping import public_url

PROFILE_ID = 1


class ClubProfile(Base):
    """Singleton (id=1) berisi sejarah dan visi klub"""
    __tablename__ = "club_profile"

    id = Column(Integer, primary_key=True)
    history = Column(Text, nullable=True)
    vision = Column(Text, nullable=True)

    # Relationships
    missions = relationship("Mission", back_populates="profile", cascade="all, delete-orphan", order_by="Mission.position")
    members = relationship("OrganizationMember", back_populates="profile", order_by="OrganizationMember.id")


class Mission(Base):
    """Satu butir misi; position menentukan urutan tampil"""
    __tablename__ = "missions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("club_profile.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    text = Column(Text, nullable=False)

    profile = relationship("ClubProfile", back_populates="missions")


class OrganizationMember(Base):
    """Anggota struktur organisasi; parent_id membentuk forest"""
    __tablename__ = "organization_members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("club_profile.id", ondelete="CASCADE"), nullable=False, default=PROFILE_ID)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    parent_id = Column(Integer, ForeignKey("organization_members.id", ondelete="SET NULL"), nullable=True)
    photo_path = Column(String(255), nullable=True)

    profile = relationship("ClubProfile", back_populates="members")

    def to_dict(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "role": self.role,
            "parentId": str(self.parent_id) if self.parent_id else None,
            "photoUrl": public_url(self.photo_path)
        }
