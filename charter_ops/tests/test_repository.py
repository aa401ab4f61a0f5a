"""
Tests for the SQLAlchemy-backed charter repository
"""
import pytest
from datetime import datetime

from charter_ops.models.schemas import (
    AssignmentRequest, AssignmentStatus, BookingStatus, InterventionAction
)
from charter_ops.utils.exceptions import (
    AssignmentConflictException, AssignmentNotFoundException, BookingNotFoundException,
    DataValidationException
)

def _request(booking_id=101, captain_id=1, crew=None):
    return AssignmentRequest(
        booking_id=booking_id,
        captain_id=captain_id,
        crew_member_ids=crew or [],
        briefing_time=datetime(2024, 8, 11, 12, 0)
    )

class TestBookings:

    def test_list_ordered_by_start(self, seeded_repository):
        assert [b.id for b in seeded_repository.list_bookings()] == [105, 104, 103, 101, 102]

    def test_get_missing_booking(self, repository):
        with pytest.raises(BookingNotFoundException):
            repository.get_booking(999)

    def test_update_status(self, seeded_repository):
        updated = seeded_repository.update_booking_status(101, "confirmed")

        assert updated.status == BookingStatus.CONFIRMED
        assert seeded_repository.get_booking(101).status == BookingStatus.CONFIRMED

    def test_update_status_skips_predecessor_check(self, seeded_repository):
        seeded_repository.update_booking_status(104, BookingStatus.PENDING)
        assert seeded_repository.get_booking(104).status == BookingStatus.PENDING

    def test_invalid_status(self, seeded_repository):
        with pytest.raises(DataValidationException) as exc_info:
            seeded_repository.update_booking_status(101, "sailing")

        assert exc_info.value.error_code == "INVALID_STATUS"
        assert seeded_repository.get_booking(101).status == BookingStatus.PENDING

    def test_update_missing_booking(self, repository):
        with pytest.raises(BookingNotFoundException):
            repository.update_booking_status(999, "confirmed")

class TestAssignments:

    def test_create_assignment(self, seeded_repository):
        assignment = seeded_repository.create_assignment(_request(crew=[5, 6]))

        assert assignment.id.startswith("assignment_101_")
        assert assignment.status == AssignmentStatus.PLANNED
        assert assignment.first_mate_id is None
        assert assignment.crew_member_ids == [5, 6]
        assert assignment.created_at is not None
        assert seeded_repository.get_assignment(assignment.id) == assignment

    def test_second_assignment_conflicts(self, seeded_repository):
        seeded_repository.create_assignment(_request())

        with pytest.raises(AssignmentConflictException):
            seeded_repository.create_assignment(_request(captain_id=2))

        assignments = seeded_repository.list_assignments()
        assert len([a for a in assignments if a.booking_id == 101]) == 1
        assert assignments[0].captain_id == 1

    def test_unknown_booking(self, seeded_repository):
        with pytest.raises(BookingNotFoundException):
            seeded_repository.create_assignment(_request(booking_id=999))
        assert seeded_repository.list_assignments() == []

    def test_update_assignment_status(self, seeded_repository):
        assignment = seeded_repository.create_assignment(_request())

        updated = seeded_repository.update_assignment_status(assignment.id, "completed")

        assert updated.status == AssignmentStatus.COMPLETED
        assert seeded_repository.get_booking(101).status == BookingStatus.PENDING

    def test_update_missing_assignment(self, seeded_repository):
        with pytest.raises(AssignmentNotFoundException):
            seeded_repository.update_assignment_status("assignment_1_1", "completed")

class TestInterventions:

    def test_interventions_append(self, seeded_repository):
        seeded_repository.create_intervention(102, InterventionAction.WEATHER_DELAY, "Fog in the harbour")
        seeded_repository.create_intervention(102, "customer_service", "Guest asked for a later return")

        records = seeded_repository.list_interventions(102)

        assert [r.action for r in records] == [InterventionAction.WEATHER_DELAY, InterventionAction.CUSTOMER_SERVICE]
        assert records[0].id != records[1].id
        assert seeded_repository.list_interventions(101) == []

    @pytest.mark.parametrize("notes", ["", "   "])
    def test_empty_notes_persist_nothing(self, seeded_repository, notes):
        with pytest.raises(DataValidationException) as exc_info:
            seeded_repository.create_intervention(102, InterventionAction.ESCALATION, notes)

        assert exc_info.value.error_code == "EMPTY_NOTES"
        assert seeded_repository.list_interventions() == []

    def test_invalid_action(self, seeded_repository):
        with pytest.raises(DataValidationException):
            seeded_repository.create_intervention(102, "reboot", "Engine restart")
        assert seeded_repository.list_interventions() == []

    def test_unknown_booking(self, seeded_repository):
        with pytest.raises(BookingNotFoundException):
            seeded_repository.create_intervention(999, InterventionAction.ESCALATION, "Who booked this?")
