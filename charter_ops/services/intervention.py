# services/intervention.py

from charter_ops.utils.exceptions import CharterOpsException
from charter_ops.utils.logger import get_service_logger

logger = get_service_logger("intervention")


def handle_intervention(repository, booking_id, action, notes):
    """
    Log an admin intervention against a booking.

    Any booking status is accepted; the booking's status and crew assignment
    are not touched. Each call appends a new record.

    Returns:
        dict: {
            status: "logged",
            message: str,
            intervention: InterventionRecord
        }
    """
    try:
        record = repository.create_intervention(booking_id, action, notes)
    except CharterOpsException as e:
        logger.log_task_error("intervention", e, {"booking_id": booking_id, "action": str(action)})
        raise

    logger.log_intervention(booking_id, record.action.value, record.id)
    return {
        "status": "logged",
        "message": "Admin intervention logged successfully",
        "intervention": record
    }


def handle_intervention_history(repository, booking_id):
    repository.get_booking(booking_id)
    return repository.list_interventions(booking_id)
