from datetime import timedelta
from typing import List, Optional

from charter_ops.models.schemas import AssignmentRequest, Booking, CrewSelection, StaffMember
from charter_ops.tools.crew_query import partition_candidates
from charter_ops.utils.exceptions import DataValidationException


def _require_candidate(staff_id: int, pool: List[StaffMember], slot: str, booking_id: int):
    if staff_id not in {s.id for s in pool}:
        raise DataValidationException(
            f"Staff {staff_id} is not an available {slot}",
            error_code="INELIGIBLE_STAFF",
            context={"booking_id": booking_id, "staff_id": staff_id, "slot": slot}
        )


def build_assignment_request(booking: Booking, staff: List[StaffMember], selection: CrewSelection,
                             notes: Optional[str] = None, briefing_lead_minutes: int = 0) -> AssignmentRequest:
    """
    Validate the admin's crew picks and build the create-assignment payload.

    Organization:
    - A captain is mandatory; nothing is built without one
    - Every pick must be in the matching candidate pool (right role, available)
    - Crew member ids must be distinct
    - Briefing is at the charter start, moved earlier by briefing_lead_minutes

    Does not look at existing assignments for the booking.

    Args:
        booking (Booking): Booking being staffed
        staff (list of StaffMember): Current staff roster
        selection (CrewSelection): Captain, optional first mate, crew members
        notes (str, optional): Instructions for the crew
        briefing_lead_minutes (int): Minutes before start_time for the briefing

    Returns:
        AssignmentRequest
    """
    if not selection.captain_id:
        raise DataValidationException(
            "A captain must be selected",
            error_code="CAPTAIN_REQUIRED",
            context={"booking_id": booking.id}
        )

    pools = partition_candidates(staff)
    _require_candidate(selection.captain_id, pools["captains"], "captain", booking.id)

    if selection.first_mate_id is not None:
        _require_candidate(selection.first_mate_id, pools["first_mates"], "first mate", booking.id)

    crew_ids = list(selection.crew_member_ids)
    if len(set(crew_ids)) != len(crew_ids):
        raise DataValidationException(
            "Crew members must be distinct",
            error_code="DUPLICATE_CREW",
            context={"booking_id": booking.id, "crew_member_ids": crew_ids}
        )
    for crew_id in crew_ids:
        _require_candidate(crew_id, pools["crew_members"], "crew member", booking.id)

    return AssignmentRequest(
        booking_id=booking.id,
        captain_id=selection.captain_id,
        first_mate_id=selection.first_mate_id,
        crew_member_ids=crew_ids,
        briefing_time=booking.start_time - timedelta(minutes=briefing_lead_minutes),
        assignment_notes=notes or f"Crew assignment for booking #{booking.id} charter"
    )
