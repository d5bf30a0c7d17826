import logging
from typing import Type, TypeVar

from fastapi import APIRouter, Depends

from api.dependencies import get_room_issuer
from api.routing import EnvelopeRoute, error_response
from api.schemas import (
    Envelope,
    ErrorResponse,
    GenerateRoomRequest,
    GenerateRoomResponse,
    ScheduleCallRequest,
    ScheduleCallResponse,
    InstantCallRequest,
    InstantCallResponse,
    RoomInfoResponse,
    EndCallRequest,
    EndCallResponse,
)
from core.exceptions import VideoCallError
from core.room_service import RoomIssuer

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/video-calls",
    tags=["video-calls"],
    route_class=EnvelopeRoute,
    responses={400: {"model": ErrorResponse}},
)

E = TypeVar("E", bound=Envelope)


def envelope(response_cls: Type[E], message: str, record) -> E:
    """Wrap an issued record in its success envelope"""
    return response_cls(success=True, message=message, **record.to_dict())


@router.post("/generate-room", response_model=GenerateRoomResponse)
def generate_room(request: GenerateRoomRequest, issuer: RoomIssuer = Depends(get_room_issuer)):
    """Generate a unique room ID for a video call"""
    try:
        ticket = issuer.generate_room(
            doctor_id=request.doctorId,
            patient_id=request.patientId,
            appointment_id=request.appointmentId,
        )
        return envelope(GenerateRoomResponse, "Video call room created successfully", ticket)
    except Exception as e:
        logger.error(f"Error creating video call room: {e}")
        return error_response(VideoCallError(f"Failed to create video call room: {e}"), status_code=400)


@router.post("/schedule", response_model=ScheduleCallResponse)
def schedule_video_call(request: ScheduleCallRequest, issuer: RoomIssuer = Depends(get_room_issuer)):
    """Create a scheduled video call appointment"""
    try:
        scheduled = issuer.schedule_call(
            doctor_id=request.doctorId,
            patient_id=request.patientId,
            doctor_name=request.doctorName,
            patient_name=request.patientName,
            scheduled_time=request.scheduledTime,
        )
        return envelope(ScheduleCallResponse, "Video call appointment scheduled successfully", scheduled)
    except Exception as e:
        logger.error(f"Error scheduling video call: {e}")
        return error_response(VideoCallError(f"Failed to schedule video call: {e}"), status_code=400)


@router.post("/start-instant-call", response_model=InstantCallResponse)
def start_instant_call(request: InstantCallRequest, issuer: RoomIssuer = Depends(get_room_issuer)):
    """Start an instant video call"""
    try:
        call = issuer.start_instant_call(
            initiator_id=request.initiatorId,
            initiator_type=request.initiatorType,
            initiator_name=request.initiatorName,
            recipient_id=request.recipientId,
            recipient_name=request.recipientName,
        )
        return envelope(InstantCallResponse, "Instant video call initiated successfully", call)
    except Exception as e:
        logger.error(f"Error starting instant call: {e}")
        return error_response(VideoCallError(f"Failed to start instant call: {e}"), status_code=400)


@router.get(
    "/room/{roomId:path}",
    response_model=RoomInfoResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_room_info(roomId: str, issuer: RoomIssuer = Depends(get_room_issuer)):
    """Get video call room information"""
    try:
        room = issuer.get_room(roomId)
        return envelope(RoomInfoResponse, "Room information retrieved successfully", room)
    except Exception as e:
        logger.error(f"Error getting room {roomId}: {e}")
        return error_response(VideoCallError(f"Room not found: {e}"), status_code=404)


@router.post("/end-call", response_model=EndCallResponse)
def end_call(request: EndCallRequest, issuer: RoomIssuer = Depends(get_room_issuer)):
    """End a video call and record call duration"""
    try:
        ended = issuer.end_call(
            room_id=request.roomId,
            user_id=request.userId,
            duration=request.duration,
        )
        return envelope(EndCallResponse, "Video call ended successfully", ended)
    except Exception as e:
        logger.error(f"Error ending call: {e}")
        return error_response(VideoCallError(f"Failed to end call: {e}"), status_code=400)
