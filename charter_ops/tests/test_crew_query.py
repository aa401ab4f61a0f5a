"""
Tests for crew candidate pools and the requires-crew listing
"""
from datetime import datetime

from charter_ops.models.schemas import StaffMember, CrewAssignment, AssignmentStatus
from charter_ops.tools.crew_query import partition_candidates, find_unassigned_bookings, summarize_crew

def _assignment(booking_id, status=AssignmentStatus.PLANNED):
    return CrewAssignment(id=f"assignment_{booking_id}_1", booking_id=booking_id, captain_id=1,
                          status=status, briefing_time=datetime(2024, 8, 11, 12, 0))

class TestPartitionCandidates:

    def test_unavailable_captain_excluded(self):
        staff = [
            StaffMember(id=1, username="a", role="captain", status="available"),
            StaffMember(id=2, username="b", role="captain", status="unavailable"),
            StaffMember(id=3, username="c", role="first_mate", status="available"),
        ]

        pools = partition_candidates(staff)

        assert [s.id for s in pools["captains"]] == [1]
        assert [s.id for s in pools["first_mates"]] == [3]
        assert pools["crew_members"] == []

    def test_full_roster(self, staff_roster):
        pools = partition_candidates(staff_roster)

        assert [s.id for s in pools["captains"]] == [1]
        assert [s.id for s in pools["first_mates"]] == [3]
        assert [s.id for s in pools["crew_members"]] == [5, 6]

    def test_pools_are_disjoint_and_exclude_other_roles(self, staff_roster):
        pools = partition_candidates(staff_roster)
        ids = [s.id for pool in pools.values() for s in pool]

        assert len(ids) == len(set(ids))
        assert 8 not in ids

    def test_role_and_status_case_normalized(self):
        staff = [StaffMember(id=1, username="a", role=" Captain ", status="AVAILABLE")]
        assert [s.id for s in partition_candidates(staff)["captains"]] == [1]

    def test_empty_roster(self):
        assert partition_candidates([]) == {"captains": [], "first_mates": [], "crew_members": []}

class TestFindUnassignedBookings:

    def test_assigned_booking_dropped(self, make_booking):
        bookings = [make_booking(1), make_booking(2), make_booking(3)]

        unassigned = find_unassigned_bookings(bookings, [_assignment(2)])

        assert [b.id for b in unassigned] == [1, 3]

    def test_assignment_status_does_not_matter(self, make_booking):
        bookings = [make_booking(1)]
        assert find_unassigned_bookings(bookings, [_assignment(1, AssignmentStatus.CANCELLED)]) == []

    def test_membership_matches_loaded_assignments(self, make_booking):
        bookings = [make_booking(i) for i in range(1, 7)]
        assignments = [_assignment(2), _assignment(5), _assignment(99)]
        assigned = {a.booking_id for a in assignments}

        unassigned = find_unassigned_bookings(bookings, assignments)

        for booking in bookings:
            assert (booking in unassigned) == (booking.id not in assigned)

    def test_no_bookings(self):
        assert find_unassigned_bookings([], [_assignment(1)]) == []

def test_summarize_crew(staff_roster, make_booking):
    bookings = [make_booking(1), make_booking(2)]
    assignments = [_assignment(1, AssignmentStatus.IN_PROGRESS)]

    overview = summarize_crew(staff_roster, bookings, assignments)

    assert overview == {
        "total_crew": 8,
        "available_crew": 4,
        "available_captains": 1,
        "total_assignments": 1,
        "active_assignments": 1,
        "bookings_requiring_crew": 1,
    }
