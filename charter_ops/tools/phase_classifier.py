from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd

from charter_ops.models.schemas import Booking, BookingStatus, Phase, PhaseView, to_naive_utc

BEFORE_STATUSES = ["pending", "confirmed"]
DURING_STATUSES = ["in_progress"]
AFTER_STATUSES = ["completed", "cancelled"]

PHASE_TARGET_STATUS = {
    Phase.BEFORE: BookingStatus.CONFIRMED,
    Phase.DURING: BookingStatus.IN_PROGRESS,
    Phase.AFTER: BookingStatus.COMPLETED,
}

PHASE_TITLES = {
    Phase.BEFORE: "Pre-Departure Management",
    Phase.DURING: "Active Charter Monitoring",
    Phase.AFTER: "Post-Charter & Reviews",
}

PHASE_ACTION_LABELS = {
    Phase.BEFORE: "Confirm",
    Phase.DURING: "Mark Active",
    Phase.AFTER: "Complete",
}


def classify_phase(booking: Booking, now: datetime) -> Optional[Phase]:
    """
    Place one booking in its charter phase.

    Organization:
    - before: charter has not started and status is pending or confirmed
    - during: now falls inside [start_time, end_time] and status is in_progress
    - after: charter has ended and status is completed or cancelled
    - anything else (e.g. still pending after end_time) belongs to no phase

    Args:
        booking (Booking): Booking to classify
        now (datetime): Evaluation instant

    Returns:
        Phase or None
    """
    now = to_naive_utc(now)
    status = booking.status.value

    if now < booking.start_time and status in BEFORE_STATUSES:
        return Phase.BEFORE
    if booking.start_time <= now <= booking.end_time and status in DURING_STATUSES:
        return Phase.DURING
    if now > booking.end_time and status in AFTER_STATUSES:
        return Phase.AFTER
    return None


def next_status(phase) -> BookingStatus:
    """Status the phase's admin action applies, whatever the booking's current status."""
    return PHASE_TARGET_STATUS[Phase(phase)]


def _bookings_frame(bookings: List[Booking]) -> pd.DataFrame:
    return pd.DataFrame(
        [{
            "id": b.id,
            "start_time": b.start_time,
            "end_time": b.end_time,
            "status": b.status.value,
        } for b in bookings],
        columns=["id", "start_time", "end_time", "status"],
    )


def phase_buckets(bookings: List[Booking], now: datetime) -> Dict[Phase, List[Booking]]:
    """
    Bucket bookings into the three phases in one pass over a frame.

    Returns:
        dict: {Phase.BEFORE: [...], Phase.DURING: [...], Phase.AFTER: [...]},
        each list keeping the input order. Bookings matching no phase are absent.
    """
    now = to_naive_utc(now)
    buckets = {phase: [] for phase in Phase}
    if not bookings:
        return buckets

    df = _bookings_frame(bookings)
    masks = {
        Phase.BEFORE: (df["start_time"] > now) & df["status"].isin(BEFORE_STATUSES),
        Phase.DURING: (df["start_time"] <= now) & (df["end_time"] >= now) & df["status"].isin(DURING_STATUSES),
        Phase.AFTER: (df["end_time"] < now) & df["status"].isin(AFTER_STATUSES),
    }

    for phase, mask in masks.items():
        ids = set(df.loc[mask, "id"].tolist())
        buckets[phase] = [b for b in bookings if b.id in ids]
    return buckets


def unclassified_bookings(bookings: List[Booking], now: datetime) -> List[Booking]:
    """Bookings that appear in no phase tab."""
    return [b for b in bookings if classify_phase(b, now) is None]


def build_phase_views(bookings: List[Booking], now: datetime) -> List[PhaseView]:
    buckets = phase_buckets(bookings, now)
    return [
        PhaseView(
            phase=phase,
            title=PHASE_TITLES[phase],
            action_label=PHASE_ACTION_LABELS[phase],
            target_status=PHASE_TARGET_STATUS[phase],
            bookings=buckets[phase],
        )
        for phase in Phase
    ]
