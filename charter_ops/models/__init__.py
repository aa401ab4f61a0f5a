"""
Data models for charter operations
"""
from .schemas import (
    Booking, StaffMember, CrewAssignment, InterventionRecord,
    CrewSelection, AssignCrewRequest, AssignmentRequest, StatusUpdateRequest,
    AssignmentStatusUpdate, InterventionRequest, PhaseView,
    BookingStatus, Phase, StaffRole, StaffStatus, AssignmentStatus,
    InterventionAction, to_naive_utc, validate_bookings, validate_staff
)

__all__ = [
    'Booking', 'StaffMember', 'CrewAssignment', 'InterventionRecord',
    'CrewSelection', 'AssignCrewRequest', 'AssignmentRequest', 'StatusUpdateRequest',
    'AssignmentStatusUpdate', 'InterventionRequest', 'PhaseView',
    'BookingStatus', 'Phase', 'StaffRole', 'StaffStatus', 'AssignmentStatus',
    'InterventionAction', 'to_naive_utc', 'validate_bookings', 'validate_staff'
]
