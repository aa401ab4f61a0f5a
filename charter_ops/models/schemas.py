"""
Data models and validation schemas for charter operations
"""
from typing import List, Optional, Dict, Any
from datetime import datetime, timezone
from pydantic import BaseModel, Field, validator
from enum import Enum

class BookingStatus(str, Enum):
    """Booking status enumeration"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Phase(str, Enum):
    """Charter phase an admin view groups a booking into"""
    BEFORE = "before"
    DURING = "during"
    AFTER = "after"

class StaffRole(str, Enum):
    """Staff roles relevant to crewing a charter"""
    CAPTAIN = "captain"
    FIRST_MATE = "first_mate"
    CREW_MEMBER = "crew_member"
    COORDINATOR = "coordinator"

class StaffStatus(str, Enum):
    """Staff availability enumeration"""
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ON_LEAVE = "on_leave"

class AssignmentStatus(str, Enum):
    """Crew assignment lifecycle, independent of the booking status"""
    PLANNED = "planned"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class InterventionAction(str, Enum):
    """Categories of admin interventions"""
    STATUS_OVERRIDE = "status_override"
    CUSTOMER_SERVICE = "customer_service"
    SAFETY_CONCERN = "safety_concern"
    EQUIPMENT_ISSUE = "equipment_issue"
    WEATHER_DELAY = "weather_delay"
    ADMIN_INTERVENTION = "admin_intervention"
    QUALITY_CHECK = "quality_check"
    ESCALATION = "escalation"

def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

class Booking(BaseModel):
    """Charter reservation"""
    id: int = Field(..., description="Booking identifier")
    member_id: Optional[int] = Field(None, description="Member who made the booking")
    yacht_id: Optional[int] = Field(None, description="Chartered yacht")
    start_time: datetime = Field(..., description="Charter start")
    end_time: datetime = Field(..., description="Charter end")
    status: BookingStatus = Field(BookingStatus.PENDING, description="Booking status")
    guest_count: int = Field(1, ge=1, description="Number of guests")
    special_requests: Optional[str] = Field(None, description="Free-text requests")
    experience_type: Optional[str] = Field(None, description="Experience type")
    booking_date: Optional[datetime] = Field(None, description="When the booking was made")

    @validator('start_time', 'booking_date')
    def normalize_times(cls, v):
        return to_naive_utc(v)

    @validator('end_time')
    def validate_window(cls, v, values):
        v = to_naive_utc(v)
        start = values.get('start_time')
        if start is not None and v <= start:
            raise ValueError('end_time must be after start_time')
        return v

class StaffMember(BaseModel):
    """Staff member who can be rostered on a charter"""
    id: int = Field(..., description="Staff identifier")
    username: str = Field(..., description="Login name")
    role: str = Field(..., description="Staff role (captain, first_mate, crew_member, ...)")
    status: str = Field(StaffStatus.AVAILABLE.value, description="Availability")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Rating 0-5")
    full_name: Optional[str] = Field(None, description="Display name")
    department: Optional[str] = Field(None, description="Department")

class CrewAssignment(BaseModel):
    """Crew roster bound to exactly one booking"""
    id: str = Field(..., description="Assignment identifier")
    booking_id: int = Field(..., description="Staffed booking")
    captain_id: int = Field(..., description="Captain in command")
    first_mate_id: Optional[int] = Field(None, description="Optional first mate")
    crew_member_ids: List[int] = Field(default_factory=list, description="Additional crew")
    status: AssignmentStatus = Field(AssignmentStatus.PLANNED, description="Assignment status")
    briefing_time: datetime = Field(..., description="Crew briefing time")
    special_instructions: Optional[str] = Field(None, description="Notes for the crew")
    created_at: Optional[datetime] = Field(None, description="Creation time")

class InterventionRecord(BaseModel):
    """Append-only admin annotation on a booking"""
    id: int = Field(..., description="Intervention identifier")
    booking_id: int = Field(..., description="Annotated booking")
    action: InterventionAction = Field(..., description="Intervention category")
    notes: str = Field(..., description="What happened and what was done")
    created_at: datetime = Field(..., description="When it was logged")

class CrewSelection(BaseModel):
    """Admin's picks in the assignment dialog"""
    captain_id: Optional[int] = Field(None, description="Selected captain")
    first_mate_id: Optional[int] = Field(None, description="Selected first mate")
    crew_member_ids: List[int] = Field(default_factory=list, description="Selected crew members")

class AssignCrewRequest(CrewSelection):
    """Body of the assign-crew dialog submission"""
    booking_id: int = Field(..., description="Booking to staff")
    assignment_notes: Optional[str] = Field(None, description="Notes for the crew")

class AssignmentRequest(BaseModel):
    """Payload of a single create-assignment call"""
    booking_id: int = Field(..., description="Booking to staff")
    captain_id: int = Field(..., gt=0, description="Mandatory captain")
    first_mate_id: Optional[int] = Field(None, description="Optional first mate")
    crew_member_ids: List[int] = Field(default_factory=list, description="Additional crew")
    briefing_time: datetime = Field(..., description="Crew briefing time")
    assignment_notes: Optional[str] = Field(None, description="Notes for the crew")

    @validator('crew_member_ids')
    def validate_distinct_crew(cls, v):
        if len(set(v)) != len(v):
            raise ValueError('crew_member_ids must not contain duplicates')
        return v

    @validator('briefing_time')
    def normalize_briefing(cls, v):
        return to_naive_utc(v)

class StatusUpdateRequest(BaseModel):
    status: BookingStatus

class AssignmentStatusUpdate(BaseModel):
    status: AssignmentStatus

class InterventionRequest(BaseModel):
    """Admin intervention form"""
    action: InterventionAction = Field(..., description="Intervention category")
    notes: str = Field(..., description="Required free-text notes")

    @validator('notes')
    def validate_notes(cls, v):
        if not v.strip():
            raise ValueError('notes must not be empty')
        return v.strip()

class PhaseView(BaseModel):
    """One admin phase tab with its bookings and action button"""
    phase: Phase
    title: str
    action_label: str
    target_status: BookingStatus
    bookings: List[Booking] = Field(default_factory=list)

def validate_bookings(booking_data: List[Dict[str, Any]]) -> List[Booking]:
    """Validate and convert booking data"""
    return [Booking(**booking) for booking in booking_data]

def validate_staff(staff_data: List[Dict[str, Any]]) -> List[StaffMember]:
    """Validate and convert staff roster data"""
    return [StaffMember(**member) for member in staff_data]
