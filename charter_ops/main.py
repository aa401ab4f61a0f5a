# main.py (CLI-based charter walkthrough)

from datetime import datetime

from charter_ops.database.models import DatabaseManager
from charter_ops.database.repository import CharterRepository
from charter_ops.database.seed import seed_demo_data
from charter_ops.models.schemas import CrewSelection, InterventionAction, Phase
from charter_ops.services.charter_phase import handle_phase_action, handle_phase_board
from charter_ops.services.crew_assignment import handle_crew_assignment, handle_crew_board
from charter_ops.services.intervention import handle_intervention
from charter_ops.tools.phase_classifier import classify_phase


def simulate_charter_day(now: datetime = None):
    now = now or datetime.utcnow()

    print("\n📦 Loading demo fleet...")
    manager = DatabaseManager("sqlite:///:memory:")
    manager.create_tables()
    repository = CharterRepository(manager)
    counts = seed_demo_data(repository, now)
    print(f"Loaded {counts['staff']} staff and {counts['bookings']} bookings")

    print("\n[1] Yacht experience phases")
    board = handle_phase_board(repository, now)
    for view in board["phases"]:
        ids = [b.id for b in view.bookings]
        print(f"  {view.title} ({view.phase.value}): {ids} -> button '{view.action_label}' sets {view.target_status.value}")

    print("\n[2] Crew management")
    crew_board = handle_crew_board(repository)
    candidates = crew_board["candidates"]
    for pool, members in candidates.items():
        print(f"  {pool}: {[m.username for m in members]}")
    unassigned = crew_board["unassigned_bookings"]
    print(f"  Bookings requiring crew: {[b.id for b in unassigned]}")

    if unassigned and candidates["captains"]:
        booking = next((b for b in unassigned if classify_phase(b, now) == Phase.BEFORE), unassigned[0])
        selection = CrewSelection(
            captain_id=candidates["captains"][0].id,
            first_mate_id=candidates["first_mates"][0].id if candidates["first_mates"] else None,
            crew_member_ids=[m.id for m in candidates["crew_members"]]
        )
        result = handle_crew_assignment(repository, booking.id, selection)
        print(f"  Status: {result['status']}")
        print(f"  Message: {result['message']}")
        remaining = handle_crew_board(repository)["unassigned_bookings"]
        print(f"  Bookings requiring crew after refresh: {[b.id for b in remaining]}")

        print("\n[3] Admin intervention")
        logged = handle_intervention(repository, booking.id, InterventionAction.WEATHER_DELAY,
                                     "Small craft advisory, departure pushed back one hour")
        print(f"  Status: {logged['status']}")
        print(f"  Booking {booking.id} status still: {repository.get_booking(booking.id).status.value}")

        print("\n[4] Phase action")
        action = handle_phase_action(repository, booking.id, now)
        print(f"  Status: {action['status']}")
        print(f"  Message: {action['message']}")

    return repository


if __name__ == "__main__":
    simulate_charter_day()
