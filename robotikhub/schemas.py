"""
Pydantic Schemas untuk RobotikHub Portal
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import date


# === Auth Schemas ===

class UserRegister(BaseModel):
    """Field wajib dicek di service agar error-nya 400, bukan 422"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = Field(None, description="ADMIN atau ANGGOTA (default)")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Admin One",
            "email": "admin1@x.com",
            "password": "secret123",
            "role": "ADMIN"
        }
    })


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# === Activity & Attendance Schemas ===

class ActivityCreate(BaseModel):
    """Schema untuk membuat kegiatan baru"""
    title: Optional[str] = None
    day: Optional[date] = Field(None, alias="date", description="Tanggal kegiatan (YYYY-MM-DD)")
    time: Optional[str] = Field(None, pattern=r"^\d{1,2}:\d{2}$", description="Jam opsional (H:MM atau HH:MM)")
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, json_schema_extra={
        "example": {
            "title": "Demo Day",
            "date": "2025-03-01",
            "time": "09:00",
            "description": "Presentasi robot line follower"
        }
    })


class AttendanceCreate(BaseModel):
    """Schema absen mandiri; memberName diterima untuk kompatibilitas klien"""
    activity_id: Optional[int] = Field(None, alias="activityId")
    member_name: Optional[str] = Field(None, alias="memberName")
    day: Optional[date] = Field(None, alias="date")

    model_config = ConfigDict(populate_by_name=True)


# === Learning Schemas ===

class LearningLinkCreate(BaseModel):
    """Materi berupa link eksternal (body JSON)"""
    title: Optional[str] = None
    type: Optional[str] = Field(None, description="PDF atau VIDEO")
    url: Optional[str] = None


# === Profile Schemas ===

class ProfileUpdate(BaseModel):
    """Semua field opsional; mission mengganti seluruh daftar misi"""
    history: Optional[str] = None
    vision: Optional[str] = None
    mission: Optional[List[str]] = None


class MessageResponse(BaseModel):
    """Generic message response"""
    status: str
    message: str
