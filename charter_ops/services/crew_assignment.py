# services/crew_assignment.py

import time

from charter_ops.config import config
from charter_ops.models.schemas import CrewSelection
from charter_ops.tools.crew_matcher import build_assignment_request
from charter_ops.tools.crew_query import find_unassigned_bookings, partition_candidates, summarize_crew
from charter_ops.utils.exceptions import CharterOpsException
from charter_ops.utils.logger import get_service_logger

logger = get_service_logger("crew_assignment")


def handle_crew_board(repository):
    """
    Load everything the crew management screen needs in one snapshot.

    Returns:
        dict: {
            candidates: {"captains": [...], "first_mates": [...], "crew_members": [...]},
            unassigned_bookings: list of Booking,
            overview: dict of counters
        }
    """
    staff = repository.list_staff()
    bookings = repository.list_bookings()
    assignments = repository.list_assignments()

    return {
        "candidates": partition_candidates(staff),
        "unassigned_bookings": find_unassigned_bookings(bookings, assignments),
        "overview": summarize_crew(staff, bookings, assignments)
    }


def handle_crew_assignment(repository, booking_id, selection: CrewSelection, notes=None,
                           briefing_lead_minutes=None):
    """
    Staff a booking with the admin's selected crew.

    Validates the selection against the current roster and issues exactly one
    create-assignment call. Whether the booking already has an assignment is
    left to the store, which rejects a second one.

    Args:
        repository (CharterRepository)
        booking_id (int): Booking to staff
        selection (CrewSelection): Captain, optional first mate, crew members
        notes (str, optional): Instructions for the crew
        briefing_lead_minutes (int, optional): Defaults to the configured lead

    Returns:
        dict: {
            status: "assigned",
            message: str,
            assignment: CrewAssignment
        }
    """
    if briefing_lead_minutes is None:
        briefing_lead_minutes = config.charter.briefing_lead_minutes

    start = time.time()
    logger.log_task_start("crew_assignment", {
        "booking_id": booking_id,
        "captain_id": selection.captain_id,
        "crew_count": len(selection.crew_member_ids)
    })

    try:
        booking = repository.get_booking(booking_id)
        staff = repository.list_staff()
        request = build_assignment_request(booking, staff, selection, notes, briefing_lead_minutes)
        assignment = repository.create_assignment(request, status=config.charter.default_assignment_status)
    except CharterOpsException as e:
        logger.log_task_error("crew_assignment", e, {"booking_id": booking_id})
        raise

    logger.log_assignment_created(assignment.id, booking_id, assignment.captain_id,
                                  1 + (1 if assignment.first_mate_id else 0) + len(assignment.crew_member_ids))
    logger.log_task_complete("crew_assignment", {"assignment_id": assignment.id}, time.time() - start)

    return {
        "status": "assigned",
        "message": f"Crew assigned to booking #{booking_id}",
        "assignment": assignment
    }


def handle_assignment_status(repository, assignment_id, status):
    """Move an assignment along its own lifecycle (e.g. completed after the charter)."""
    try:
        assignment = repository.update_assignment_status(assignment_id, status)
    except CharterOpsException as e:
        logger.log_task_error("assignment_status", e, {"assignment_id": assignment_id})
        raise

    logger.info("Crew assignment status updated", assignment_id=assignment_id, status=assignment.status.value)
    return {
        "status": "updated",
        "message": f"Assignment {assignment_id} set to {assignment.status.value}.",
        "assignment": assignment
    }
