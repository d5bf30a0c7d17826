from typing import Optional, Annotated
from pydantic import BaseModel, Field, StrictInt

from core.exceptions import ErrorKind

# seconds, 32-bit
DurationSeconds = Annotated[StrictInt, Field(ge=-2**31, le=2**31 - 1)]


# Requests
class GenerateRoomRequest(BaseModel):
    doctorId: Optional[str] = None
    patientId: Optional[str] = None
    appointmentId: Optional[str] = None

class ScheduleCallRequest(BaseModel):
    doctorId: Optional[str] = None
    patientId: Optional[str] = None
    doctorName: Optional[str] = None
    patientName: Optional[str] = None
    scheduledTime: Optional[str] = None

class InstantCallRequest(BaseModel):
    initiatorId: Optional[str] = None
    initiatorType: Optional[str] = None  # "doctor" or "patient"
    initiatorName: Optional[str] = None
    recipientId: Optional[str] = None
    recipientName: Optional[str] = None

class EndCallRequest(BaseModel):
    roomId: Optional[str] = None
    userId: Optional[str] = None
    duration: Optional[DurationSeconds] = None


# Responses
class Envelope(BaseModel):
    success: bool = True
    message: str

class GenerateRoomResponse(Envelope):
    roomId: str
    doctorId: Optional[str] = None
    patientId: Optional[str] = None
    signalingServer: str
    createdAt: str

class ScheduleCallResponse(Envelope):
    appointmentId: str
    roomId: str
    doctorId: Optional[str] = None
    patientId: Optional[str] = None
    doctorName: Optional[str] = None
    patientName: Optional[str] = None
    scheduledTime: Optional[str] = None
    status: str
    signalingServer: str
    createdAt: str

class InstantCallResponse(Envelope):
    roomId: str
    initiatorId: Optional[str] = None
    initiatorType: Optional[str] = None
    initiatorName: Optional[str] = None
    recipientId: Optional[str] = None
    recipientName: Optional[str] = None
    callType: str
    signalingServer: str
    startedAt: str

class RoomInfoResponse(Envelope):
    roomId: str
    status: str
    signalingServer: str

class EndCallResponse(Envelope):
    roomId: Optional[str] = None
    userId: Optional[str] = None
    duration: Optional[int] = None
    endedAt: str

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    errorKind: ErrorKind

class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
