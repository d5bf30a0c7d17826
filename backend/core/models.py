from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict
from enum import Enum


class RoomStatus(Enum):
    SCHEDULED = "SCHEDULED"
    ACTIVE = "ACTIVE"


class CallType(Enum):
    INSTANT = "INSTANT"


class InitiatorType(Enum):
    """Expected initiatorType values; others are logged and echoed back"""
    DOCTOR = "doctor"
    PATIENT = "patient"


@dataclass
class RoomTicket:
    room_id: str
    doctor_id: Optional[str]
    patient_id: Optional[str]
    signaling_server: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "doctorId": self.doctor_id,
            "patientId": self.patient_id,
            "signalingServer": self.signaling_server,
            "createdAt": self.created_at,
        }


@dataclass
class ScheduledCall:
    appointment_id: str
    room_id: str
    doctor_id: Optional[str]
    patient_id: Optional[str]
    doctor_name: Optional[str]
    patient_name: Optional[str]
    scheduled_time: Optional[str]  # passed through as given
    signaling_server: str
    created_at: str
    status: RoomStatus = RoomStatus.SCHEDULED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "appointmentId": self.appointment_id,
            "roomId": self.room_id,
            "doctorId": self.doctor_id,
            "patientId": self.patient_id,
            "doctorName": self.doctor_name,
            "patientName": self.patient_name,
            "scheduledTime": self.scheduled_time,
            "status": self.status.value,
            "signalingServer": self.signaling_server,
            "createdAt": self.created_at,
        }


@dataclass
class InstantCall:
    room_id: str
    initiator_id: Optional[str]
    initiator_type: Optional[str]
    initiator_name: Optional[str]
    recipient_id: Optional[str]
    recipient_name: Optional[str]
    signaling_server: str
    started_at: str
    call_type: CallType = CallType.INSTANT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "initiatorId": self.initiator_id,
            "initiatorType": self.initiator_type,
            "initiatorName": self.initiator_name,
            "recipientId": self.recipient_id,
            "recipientName": self.recipient_name,
            "callType": self.call_type.value,
            "signalingServer": self.signaling_server,
            "startedAt": self.started_at,
        }


@dataclass
class RoomInfo:
    room_id: str
    signaling_server: str
    status: RoomStatus = RoomStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "status": self.status.value,
            "signalingServer": self.signaling_server,
        }


@dataclass
class CallEnd:
    room_id: Optional[str]
    user_id: Optional[str]
    duration: Optional[int]  # seconds
    ended_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "userId": self.user_id,
            "duration": self.duration,
            "endedAt": self.ended_at,
        }


@dataclass
class HealthStatus:
    service: str
    timestamp: str
    status: str = "OK"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
