"""
Demo fleet data: a handful of staff and charters spread across every phase.
"""
from datetime import datetime, timedelta
from typing import Dict

from charter_ops.models.schemas import Booking, BookingStatus, validate_staff

STAFF = [
    {"id": 1, "username": "captain_morgan", "role": "captain", "status": "available", "rating": 4.9, "full_name": "Alex Morgan", "department": "Yacht Operations"},
    {"id": 2, "username": "captain_reyes", "role": "captain", "status": "unavailable", "rating": 4.7, "full_name": "Sofia Reyes", "department": "Yacht Operations"},
    {"id": 3, "username": "mate_chen", "role": "first_mate", "status": "available", "rating": 4.6, "full_name": "Daniel Chen", "department": "Yacht Operations"},
    {"id": 4, "username": "mate_okafor", "role": "first_mate", "status": "on_leave", "rating": 4.4, "full_name": "Grace Okafor", "department": "Yacht Operations"},
    {"id": 5, "username": "deckhand_silva", "role": "crew_member", "status": "available", "rating": 4.5, "full_name": "Marco Silva", "department": "Deck"},
    {"id": 6, "username": "steward_kim", "role": "crew_member", "status": "available", "rating": 4.8, "full_name": "Hana Kim", "department": "Hospitality"},
    {"id": 7, "username": "deckhand_brooks", "role": "crew_member", "status": "unavailable", "rating": 4.1, "full_name": "Tyler Brooks", "department": "Deck"},
    {"id": 8, "username": "fleet_coord", "role": "coordinator", "status": "available", "rating": None, "full_name": "Priya Patel", "department": "Fleet"},
]

def demo_bookings(now: datetime):
    """Bookings positioned relative to ``now``: two before, one during, one after, one stale."""
    day = timedelta(days=1)
    hour = timedelta(hours=1)
    return [
        Booking(id=101, member_id=11, yacht_id=1, start_time=now + day, end_time=now + day + 4 * hour,
                status=BookingStatus.PENDING, guest_count=6, experience_type="sunset_cruise",
                special_requests="Champagne on arrival", booking_date=now - 3 * day),
        Booking(id=102, member_id=12, yacht_id=2, start_time=now + 2 * day, end_time=now + 2 * day + 6 * hour,
                status=BookingStatus.CONFIRMED, guest_count=10, experience_type="day_charter",
                booking_date=now - 5 * day),
        Booking(id=103, member_id=13, yacht_id=3, start_time=now - hour, end_time=now + 3 * hour,
                status=BookingStatus.IN_PROGRESS, guest_count=4, experience_type="fishing",
                booking_date=now - 7 * day),
        Booking(id=104, member_id=11, yacht_id=1, start_time=now - 2 * day, end_time=now - 2 * day + 5 * hour,
                status=BookingStatus.COMPLETED, guest_count=8, experience_type="day_charter",
                booking_date=now - 10 * day),
        Booking(id=105, member_id=14, yacht_id=2, start_time=now - 3 * day, end_time=now - 3 * day + 3 * hour,
                status=BookingStatus.PENDING, guest_count=2, experience_type="sunset_cruise",
                booking_date=now - 12 * day),
    ]

def seed_demo_data(repository, now: datetime = None) -> Dict[str, int]:
    """Load demo staff and bookings into an empty store"""
    now = now or datetime.utcnow()
    staff = [repository.add_staff(member) for member in validate_staff(STAFF)]
    bookings = [repository.add_booking(booking) for booking in demo_bookings(now)]
    return {"staff": len(staff), "bookings": len(bookings)}
