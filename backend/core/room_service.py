"""
Room issuing for doctor-patient video calls.

Nothing is stored: every identifier is generated on request and handed
back to the caller together with the signaling server address clients
should connect to. Existence of rooms is never checked.
"""
import uuid
import logging
from datetime import datetime
from typing import Callable, Optional

from core.models import (
    RoomTicket,
    ScheduledCall,
    InstantCall,
    RoomInfo,
    CallEnd,
    HealthStatus,
    InitiatorType,
)

logger = logging.getLogger(__name__)

ROOM_PREFIX = "ROOM"
APPOINTMENT_PREFIX = "APPT"
INSTANT_PREFIX = "INSTANT"


def prefixed(prefix: str, token: str) -> str:
    return f"{prefix}-{token}"


def generate_id(prefix: str) -> str:
    """Generate a collision-resistant identifier such as ROOM-<uuid4>"""
    return prefixed(prefix, str(uuid.uuid4()))


class RoomIssuer:
    def __init__(
        self,
        signaling_server: str,
        service_name: str = "Video Call Service",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.signaling_server = signaling_server
        self.service_name = service_name
        self.clock = clock

    def _now(self) -> str:
        return self.clock().isoformat()

    def generate_room(
        self,
        doctor_id: Optional[str] = None,
        patient_id: Optional[str] = None,
        appointment_id: Optional[str] = None,
    ) -> RoomTicket:
        """Issue a room, reusing the appointment id as room id when one is given"""
        room_id = appointment_id if appointment_id is not None else generate_id(ROOM_PREFIX)
        logger.info(f"Issued room {room_id} for doctor={doctor_id} patient={patient_id}")
        return RoomTicket(
            room_id=room_id,
            doctor_id=doctor_id,
            patient_id=patient_id,
            signaling_server=self.signaling_server,
            created_at=self._now(),
        )

    def schedule_call(
        self,
        doctor_id: Optional[str] = None,
        patient_id: Optional[str] = None,
        doctor_name: Optional[str] = None,
        patient_name: Optional[str] = None,
        scheduled_time: Optional[str] = None,
    ) -> ScheduledCall:
        """Issue an appointment id and the room derived from it"""
        appointment_id = generate_id(APPOINTMENT_PREFIX)
        room_id = prefixed(ROOM_PREFIX, appointment_id)
        logger.info(f"Scheduled appointment {appointment_id} at {scheduled_time}")
        return ScheduledCall(
            appointment_id=appointment_id,
            room_id=room_id,
            doctor_id=doctor_id,
            patient_id=patient_id,
            doctor_name=doctor_name,
            patient_name=patient_name,
            scheduled_time=scheduled_time,
            signaling_server=self.signaling_server,
            created_at=self._now(),
        )

    def start_instant_call(
        self,
        initiator_id: Optional[str] = None,
        initiator_type: Optional[str] = None,
        initiator_name: Optional[str] = None,
        recipient_id: Optional[str] = None,
        recipient_name: Optional[str] = None,
    ) -> InstantCall:
        known_types = {t.value for t in InitiatorType}
        if initiator_type is not None and initiator_type not in known_types:
            logger.warning(f"Unexpected initiatorType '{initiator_type}', echoing it unchanged")

        room_id = generate_id(INSTANT_PREFIX)
        logger.info(f"Instant call {room_id} from {initiator_id} to {recipient_id}")
        return InstantCall(
            room_id=room_id,
            initiator_id=initiator_id,
            initiator_type=initiator_type,
            initiator_name=initiator_name,
            recipient_id=recipient_id,
            recipient_name=recipient_name,
            signaling_server=self.signaling_server,
            started_at=self._now(),
        )

    def get_room(self, room_id: str) -> RoomInfo:
        # No registry to consult, every room is reported active
        return RoomInfo(room_id=room_id, signaling_server=self.signaling_server)

    def end_call(
        self,
        room_id: Optional[str] = None,
        user_id: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> CallEnd:
        logger.info(f"Call ended in room {room_id} by {user_id} after {duration}s")
        return CallEnd(
            room_id=room_id,
            user_id=user_id,
            duration=duration,
            ended_at=self._now(),
        )

    def health(self) -> HealthStatus:
        return HealthStatus(service=self.service_name, timestamp=self._now())
