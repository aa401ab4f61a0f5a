"""
Unit tests for data models and schemas
"""
import pytest
from datetime import datetime, timezone, timedelta
from pydantic import ValidationError
from charter_ops.models.schemas import (
    Booking, StaffMember, AssignmentRequest, InterventionRequest, CrewAssignment,
    BookingStatus, InterventionAction, AssignmentStatus, validate_bookings
)

class TestBooking:

    def test_valid_booking(self):
        booking = Booking(
            id=42,
            start_time="2024-08-11T17:00:00",
            end_time="2024-08-11T21:00:00",
            status="pending",
            guest_count=6
        )

        assert booking.id == 42
        assert booking.status == BookingStatus.PENDING
        assert booking.start_time == datetime(2024, 8, 11, 17, 0)

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            Booking(id=1, start_time="2024-08-11T17:00:00", end_time="2024-08-11T16:00:00")

    def test_zero_length_window(self):
        with pytest.raises(ValidationError):
            Booking(id=1, start_time="2024-08-11T17:00:00", end_time="2024-08-11T17:00:00")

    def test_aware_times_normalized_to_utc(self):
        tz = timezone(timedelta(hours=-4))
        booking = Booking(
            id=1,
            start_time=datetime(2024, 8, 11, 13, 0, tzinfo=tz),
            end_time=datetime(2024, 8, 11, 17, 0, tzinfo=tz)
        )

        assert booking.start_time == datetime(2024, 8, 11, 17, 0)
        assert booking.end_time == datetime(2024, 8, 11, 21, 0)
        assert booking.start_time.tzinfo is None

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            Booking(id=1, start_time="2024-08-11T17:00:00", end_time="2024-08-11T21:00:00", status="stale")

class TestStaffMember:

    def test_rating_out_of_range(self):
        with pytest.raises(ValidationError):
            StaffMember(id=1, username="captain_a", role="captain", rating=5.5)

    def test_default_status_available(self):
        member = StaffMember(id=1, username="captain_a", role="captain")
        assert member.status == "available"

class TestAssignmentRequest:

    def test_duplicate_crew_rejected(self):
        with pytest.raises(ValidationError):
            AssignmentRequest(booking_id=42, captain_id=1, crew_member_ids=[5, 5],
                              briefing_time="2024-08-11T17:00:00")

    def test_captain_required(self):
        with pytest.raises(ValidationError):
            AssignmentRequest(booking_id=42, crew_member_ids=[5], briefing_time="2024-08-11T17:00:00")

    def test_captain_must_be_positive(self):
        with pytest.raises(ValidationError):
            AssignmentRequest(booking_id=42, captain_id=0, briefing_time="2024-08-11T17:00:00")

    def test_first_mate_optional(self):
        request = AssignmentRequest(booking_id=42, captain_id=1, briefing_time="2024-08-11T17:00:00")
        assert request.first_mate_id is None
        assert request.crew_member_ids == []

class TestInterventionRequest:

    def test_blank_notes_rejected(self):
        with pytest.raises(ValidationError):
            InterventionRequest(action="weather_delay", notes="   ")

    def test_notes_trimmed(self):
        request = InterventionRequest(action="safety_concern", notes="  Life jacket count short  ")
        assert request.notes == "Life jacket count short"
        assert request.action == InterventionAction.SAFETY_CONCERN

    def test_unknown_action(self):
        with pytest.raises(ValidationError):
            InterventionRequest(action="reboot", notes="x")

def test_crew_assignment_defaults():
    assignment = CrewAssignment(id="assignment_42_1", booking_id=42, captain_id=1,
                                briefing_time="2024-08-11T17:00:00")
    assert assignment.status == AssignmentStatus.PLANNED
    assert assignment.first_mate_id is None
    assert assignment.crew_member_ids == []

def test_validate_bookings():
    bookings = validate_bookings([
        {"id": 1, "start_time": "2024-08-11T10:00:00", "end_time": "2024-08-11T14:00:00"},
        {"id": 2, "start_time": "2024-08-12T10:00:00", "end_time": "2024-08-12T14:00:00", "status": "confirmed"},
    ])

    assert [b.id for b in bookings] == [1, 2]
    assert bookings[0].status == BookingStatus.PENDING
