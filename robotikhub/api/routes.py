"""
API Routes
"""
from fastapi import APIRouter

from robotikhub.database import test_connection

router = APIRouter(prefix="/api", tags=["API"])


@router.get("/health")
async def health_check():
    """Check service health and database connection"""
    db_status = test_connection()
    return {
        "status": "ok",
        "service": "RobotikHub Portal",
        "database": db_status
    }
