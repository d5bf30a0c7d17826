import re
from datetime import datetime

from core.models import RoomStatus, CallType
from core.room_service import RoomIssuer, generate_id

UUID_RE = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
FIXED_NOW = datetime(2024, 1, 1, 10, 0, 0)


def make_issuer():
    return RoomIssuer("http://localhost:4000", clock=lambda: FIXED_NOW)


def test_generate_id_uses_prefix_and_uuid():
    assert re.fullmatch(rf"ROOM-{UUID_RE}", generate_id("ROOM"))
    assert generate_id("ROOM") != generate_id("ROOM")


def test_generate_room_reuses_appointment_id():
    ticket = make_issuer().generate_room("D1", "P1", "APPT-42")
    assert ticket.room_id == "APPT-42"
    assert ticket.created_at == "2024-01-01T10:00:00"


def test_generate_room_keeps_empty_appointment_id():
    assert make_issuer().generate_room(appointment_id="").room_id == ""


def test_generate_room_without_appointment_id():
    issuer = make_issuer()
    first = issuer.generate_room("D1", "P1")
    second = issuer.generate_room("D1", "P1")
    assert re.fullmatch(rf"ROOM-{UUID_RE}", first.room_id)
    assert first.room_id != second.room_id
    assert first.to_dict()["doctorId"] == "D1"


def test_schedule_call_derives_room_from_appointment():
    scheduled = make_issuer().schedule_call("D1", "P1", scheduled_time="not a date")
    assert re.fullmatch(rf"APPT-{UUID_RE}", scheduled.appointment_id)
    assert scheduled.room_id == "ROOM-" + scheduled.appointment_id
    assert scheduled.status is RoomStatus.SCHEDULED
    assert scheduled.to_dict()["scheduledTime"] == "not a date"


def test_instant_call_echoes_unknown_initiator_type():
    call = make_issuer().start_instant_call("U1", "nurse", "Ann", "U2", "Bob")
    assert re.fullmatch(rf"INSTANT-{UUID_RE}", call.room_id)
    assert call.call_type is CallType.INSTANT
    assert call.initiator_type == "nurse"
    assert call.started_at == "2024-01-01T10:00:00"


def test_get_room_is_always_active():
    info = make_issuer().get_room("never-issued")
    assert info.to_dict() == {
        "roomId": "never-issued",
        "status": "ACTIVE",
        "signalingServer": "http://localhost:4000",
    }


def test_end_call_accepts_negative_duration():
    ended = make_issuer().end_call("ROOM-1", "U1", -5)
    assert ended.to_dict() == {
        "roomId": "ROOM-1",
        "userId": "U1",
        "duration": -5,
        "endedAt": "2024-01-01T10:00:00",
    }


def test_health():
    health = RoomIssuer("http://x", service_name="Calls", clock=lambda: FIXED_NOW).health()
    assert health.to_dict() == {
        "service": "Calls",
        "timestamp": "2024-01-01T10:00:00",
        "status": "OK",
    }
