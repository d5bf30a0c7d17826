from fastapi import APIRouter, Depends

from api.dependencies import get_room_issuer
from api.schemas import HealthResponse
from core.room_service import RoomIssuer

router = APIRouter(prefix="/api/video-calls", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check(issuer: RoomIssuer = Depends(get_room_issuer)):
    """Health check endpoint"""
    return HealthResponse(**issuer.health().to_dict())
