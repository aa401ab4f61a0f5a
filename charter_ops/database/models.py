"""
Database models for charter operations
"""
from sqlalchemy import create_engine, Column, String, Integer, Float, DateTime, Text, ForeignKey
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from datetime import datetime
import json

from charter_ops.config import config
from charter_ops.models.schemas import Booking, StaffMember, CrewAssignment, InterventionRecord
from charter_ops.utils.logger import get_service_logger

Base = declarative_base()

db_logger = get_service_logger("database")

class BookingRecord(Base):
    """Database model for charter bookings"""
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, nullable=True)
    yacht_id = Column(Integer, nullable=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    status = Column(String, nullable=False, default="pending")
    guest_count = Column(Integer, default=1)
    special_requests = Column(Text, nullable=True)
    experience_type = Column(String, nullable=True)
    booking_date = Column(DateTime, default=datetime.utcnow)

    def to_schema(self) -> Booking:
        return Booking(
            id=self.id,
            member_id=self.member_id,
            yacht_id=self.yacht_id,
            start_time=self.start_time,
            end_time=self.end_time,
            status=self.status,
            guest_count=self.guest_count or 1,
            special_requests=self.special_requests,
            experience_type=self.experience_type,
            booking_date=self.booking_date
        )

class StaffRecord(Base):
    """Database model for staff members"""
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    role = Column(String, nullable=False)
    status = Column(String, nullable=False, default="available")
    rating = Column(Float, nullable=True)
    full_name = Column(String, nullable=True)
    department = Column(String, nullable=True)

    def to_schema(self) -> StaffMember:
        return StaffMember(
            id=self.id,
            username=self.username,
            role=self.role,
            status=self.status,
            rating=self.rating,
            full_name=self.full_name,
            department=self.department
        )

class CrewAssignmentRecord(Base):
    """Database model for crew assignments; at most one row per booking"""
    __tablename__ = "crew_assignments"

    id = Column(String, primary_key=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, unique=True)
    captain_id = Column(Integer, ForeignKey("staff.id"), nullable=False)
    first_mate_id = Column(Integer, ForeignKey("staff.id"), nullable=True)
    crew_member_ids = Column(Text, nullable=True)  # JSON list
    status = Column(String, nullable=False, default="planned")
    briefing_time = Column(DateTime, nullable=False)
    special_instructions = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def set_crew_member_ids(self, ids):
        """Set crew member ids as JSON string"""
        self.crew_member_ids = json.dumps(list(ids or []))

    def get_crew_member_ids(self):
        """Get crew member ids as a list"""
        return json.loads(self.crew_member_ids) if self.crew_member_ids else []

    def to_schema(self) -> CrewAssignment:
        return CrewAssignment(
            id=self.id,
            booking_id=self.booking_id,
            captain_id=self.captain_id,
            first_mate_id=self.first_mate_id,
            crew_member_ids=self.get_crew_member_ids(),
            status=self.status,
            briefing_time=self.briefing_time,
            special_instructions=self.special_instructions,
            created_at=self.created_at
        )

class InterventionLogRecord(Base):
    """Database model for admin interventions (append-only)"""
    __tablename__ = "interventions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False)
    action = Column(String, nullable=False)
    notes = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_schema(self) -> InterventionRecord:
        return InterventionRecord(
            id=self.id,
            booking_id=self.booking_id,
            action=self.action,
            notes=self.notes,
            created_at=self.created_at
        )

# Database connection and session management
class DatabaseManager:
    """Database connection and session manager"""

    def __init__(self, url: str = None):
        self.url = url or config.database.url
        engine_kwargs = {"echo": config.app.debug}
        if self.url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url:
                # one shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self):
        """Create all database tables"""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        Base.metadata.drop_all(bind=self.engine)

    def get_session(self):
        """Get a database session"""
        return self.SessionLocal()

    def close(self):
        """Close database connection"""
        if hasattr(self, 'engine'):
            self.engine.dispose()

# Global database manager instance
db_manager = DatabaseManager()

# Initialize database on import
try:
    db_manager.create_tables()
except Exception as e:
    db_logger.warning("Database initialization failed", error=str(e), url=db_manager.url)
