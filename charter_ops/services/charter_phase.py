# services/charter_phase.py

import time
from datetime import datetime

from charter_ops.config import config
from charter_ops.models.schemas import to_naive_utc
from charter_ops.tools.phase_classifier import (
    build_phase_views, classify_phase, next_status, unclassified_bookings
)
from charter_ops.utils.exceptions import CharterOpsException
from charter_ops.utils.logger import get_service_logger

logger = get_service_logger("charter_phase")


def _resolve_now(now):
    return to_naive_utc(now) if now is not None else datetime.utcnow()


def handle_phase_board(repository, now=None):
    """
    Build the three admin phase tabs from the current bookings.

    Args:
        repository (CharterRepository)
        now (datetime, optional): Evaluation instant, wall clock if omitted

    Returns:
        dict: {
            status: str,
            evaluated_at: datetime,
            phases: list of PhaseView,
            refresh_after_seconds: int
        }
    """
    now = _resolve_now(now)
    bookings = repository.list_bookings()
    views = build_phase_views(bookings, now)

    stale = unclassified_bookings(bookings, now)
    if stale:
        logger.log_unclassified(len(stale), [b.id for b in stale])

    return {
        "status": "ok",
        "evaluated_at": now,
        "phases": views,
        "refresh_after_seconds": config.charter.refetch_interval_seconds
    }


def handle_phase_action(repository, booking_id, now=None):
    """
    Apply the action button of the booking's current phase.

    The phase's canonical status is written whatever the current status is.
    A booking that sits in no phase has no button, so nothing is written.

    Returns:
        dict: {
            status: "updated" | "no_action",
            message: str,
            phase: Phase or None,
            booking: Booking
        }
    """
    now = _resolve_now(now)
    start = time.time()
    logger.log_task_start("phase_action", {"booking_id": booking_id, "now": now.isoformat()})

    try:
        booking = repository.get_booking(booking_id)
        phase = classify_phase(booking, now)

        if phase is None:
            result = {
                "status": "no_action",
                "message": f"Booking {booking_id} ({booking.status.value}) is outside every phase; no action available.",
                "phase": None,
                "booking": booking
            }
        else:
            target = next_status(phase)
            updated = repository.update_booking_status(booking_id, target)
            logger.log_status_change(booking_id, booking.status.value, target.value, phase.value)
            result = {
                "status": "updated",
                "message": f"Booking {booking_id} set to {target.value}.",
                "phase": phase,
                "booking": updated
            }
    except CharterOpsException as e:
        logger.log_task_error("phase_action", e, {"booking_id": booking_id})
        raise

    logger.log_task_complete("phase_action", {"booking_id": booking_id, "status": result["status"]},
                             time.time() - start)
    return result


def handle_status_update(repository, booking_id, status):
    """Explicit admin status change, no predecessor check."""
    start = time.time()
    logger.log_task_start("status_update", {"booking_id": booking_id, "status": str(status)})

    try:
        before = repository.get_booking(booking_id)
        updated = repository.update_booking_status(booking_id, status)
    except CharterOpsException as e:
        logger.log_task_error("status_update", e, {"booking_id": booking_id})
        raise

    logger.log_status_change(booking_id, before.status.value, updated.status.value)
    logger.log_task_complete("status_update", {"booking_id": booking_id}, time.time() - start)
    return {
        "status": "updated",
        "message": "Booking status updated successfully",
        "booking": updated
    }
