from fastapi import Depends

from core.config import Settings, get_settings
from core.room_service import RoomIssuer


def get_room_issuer(settings: Settings = Depends(get_settings)) -> RoomIssuer:
    return RoomIssuer(
        signaling_server=settings.SIGNALING_SERVER_URL,
        service_name=settings.SERVICE_NAME,
    )
