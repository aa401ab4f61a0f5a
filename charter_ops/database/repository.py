"""
Backing store operations consumed by the charter coordinators.

Every public method runs in its own transaction: it either commits as a
whole or rolls back and raises. Uniqueness of crew assignments per booking
is enforced here by the ``crew_assignments.booking_id`` constraint, not by
the callers' read of the assignment list.
"""
import time
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from charter_ops.database.models import (
    DatabaseManager, db_manager, BookingRecord, StaffRecord,
    CrewAssignmentRecord, InterventionLogRecord
)
from charter_ops.models.schemas import (
    Booking, StaffMember, CrewAssignment, InterventionRecord, AssignmentRequest,
    BookingStatus, AssignmentStatus, InterventionAction
)
from charter_ops.utils.exceptions import (
    CharterOpsException, DatabaseException, DataValidationException,
    BookingNotFoundException, AssignmentNotFoundException, AssignmentConflictException
)

def coerce_enum(enum_cls, value, field: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        raise DataValidationException(
            f"Invalid {field}: {value}",
            error_code="INVALID_" + field.upper(),
            context={field: str(value)}
        ) from e

def make_assignment_id(booking_id: int) -> str:
    return f"assignment_{booking_id}_{int(time.time() * 1000)}"

class CharterRepository:
    """SQLAlchemy-backed store for bookings, staff, assignments and interventions"""

    def __init__(self, manager: Optional[DatabaseManager] = None):
        self.manager = manager or db_manager

    @contextmanager
    def session_scope(self):
        session = self.manager.get_session()
        try:
            yield session
            session.commit()
        except CharterOpsException:
            session.rollback()
            raise
        except SQLAlchemyError as e:
            session.rollback()
            raise DatabaseException(str(e), error_code="DATABASE_ERROR") from e
        finally:
            session.close()

    # Bookings

    def list_bookings(self) -> List[Booking]:
        with self.session_scope() as session:
            rows = session.query(BookingRecord).order_by(BookingRecord.start_time, BookingRecord.id).all()
            return [row.to_schema() for row in rows]

    def get_booking(self, booking_id: int) -> Booking:
        with self.session_scope() as session:
            return self._booking_row(session, booking_id).to_schema()

    def add_booking(self, booking: Booking) -> Booking:
        with self.session_scope() as session:
            row = BookingRecord(
                id=booking.id,
                member_id=booking.member_id,
                yacht_id=booking.yacht_id,
                start_time=booking.start_time,
                end_time=booking.end_time,
                status=booking.status.value,
                guest_count=booking.guest_count,
                special_requests=booking.special_requests,
                experience_type=booking.experience_type,
                booking_date=booking.booking_date or datetime.utcnow()
            )
            session.add(row)
            session.flush()
            return row.to_schema()

    def update_booking_status(self, booking_id: int, status) -> Booking:
        """Set a booking's status; no check of the current status is made."""
        new_status = coerce_enum(BookingStatus, status, "status")
        with self.session_scope() as session:
            row = self._booking_row(session, booking_id)
            row.status = new_status.value
            session.flush()
            return row.to_schema()

    # Staff

    def list_staff(self) -> List[StaffMember]:
        with self.session_scope() as session:
            rows = session.query(StaffRecord).order_by(StaffRecord.id).all()
            return [row.to_schema() for row in rows]

    def add_staff(self, member: StaffMember) -> StaffMember:
        with self.session_scope() as session:
            row = StaffRecord(
                id=member.id,
                username=member.username,
                role=member.role,
                status=member.status,
                rating=member.rating,
                full_name=member.full_name,
                department=member.department
            )
            session.add(row)
            session.flush()
            return row.to_schema()

    # Crew assignments

    def list_assignments(self) -> List[CrewAssignment]:
        with self.session_scope() as session:
            rows = session.query(CrewAssignmentRecord).order_by(CrewAssignmentRecord.created_at).all()
            return [row.to_schema() for row in rows]

    def get_assignment(self, assignment_id: str) -> CrewAssignment:
        with self.session_scope() as session:
            return self._assignment_row(session, assignment_id).to_schema()

    def create_assignment(self, request: AssignmentRequest,
                          status=AssignmentStatus.PLANNED) -> CrewAssignment:
        """Insert the single assignment for a booking; a second one is a conflict."""
        with self.session_scope() as session:
            self._booking_row(session, request.booking_id)
            row = CrewAssignmentRecord(
                id=make_assignment_id(request.booking_id),
                booking_id=request.booking_id,
                captain_id=request.captain_id,
                first_mate_id=request.first_mate_id,
                status=coerce_enum(AssignmentStatus, status, "status").value,
                briefing_time=request.briefing_time,
                special_instructions=request.assignment_notes,
                created_at=datetime.utcnow()
            )
            row.set_crew_member_ids(request.crew_member_ids)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as e:
                raise AssignmentConflictException(
                    f"Booking {request.booking_id} already has a crew assignment",
                    error_code="ASSIGNMENT_CONFLICT",
                    context={"booking_id": request.booking_id}
                ) from e
            return row.to_schema()

    def update_assignment_status(self, assignment_id: str, status) -> CrewAssignment:
        new_status = coerce_enum(AssignmentStatus, status, "status")
        with self.session_scope() as session:
            row = self._assignment_row(session, assignment_id)
            row.status = new_status.value
            row.updated_at = datetime.utcnow()
            session.flush()
            return row.to_schema()

    # Interventions

    def create_intervention(self, booking_id: int, action, notes: str) -> InterventionRecord:
        """Append one intervention record; the booking row itself is left untouched."""
        if not notes or not notes.strip():
            raise DataValidationException(
                "Intervention notes are required",
                error_code="EMPTY_NOTES",
                context={"booking_id": booking_id}
            )
        with self.session_scope() as session:
            self._booking_row(session, booking_id)
            row = InterventionLogRecord(
                booking_id=booking_id,
                action=coerce_enum(InterventionAction, action, "action").value,
                notes=notes.strip(),
                created_at=datetime.utcnow()
            )
            session.add(row)
            session.flush()
            return row.to_schema()

    def list_interventions(self, booking_id: Optional[int] = None) -> List[InterventionRecord]:
        with self.session_scope() as session:
            query = session.query(InterventionLogRecord)
            if booking_id is not None:
                query = query.filter(InterventionLogRecord.booking_id == booking_id)
            rows = query.order_by(InterventionLogRecord.created_at, InterventionLogRecord.id).all()
            return [row.to_schema() for row in rows]

    # Helpers

    def _booking_row(self, session, booking_id: int) -> BookingRecord:
        row = session.get(BookingRecord, booking_id)
        if row is None:
            raise BookingNotFoundException(
                f"Booking {booking_id} not found",
                error_code="BOOKING_NOT_FOUND",
                context={"booking_id": booking_id}
            )
        return row

    def _assignment_row(self, session, assignment_id: str) -> CrewAssignmentRecord:
        row = session.get(CrewAssignmentRecord, assignment_id)
        if row is None:
            raise AssignmentNotFoundException(
                f"Crew assignment {assignment_id} not found",
                error_code="ASSIGNMENT_NOT_FOUND",
                context={"assignment_id": assignment_id}
            )
        return row
