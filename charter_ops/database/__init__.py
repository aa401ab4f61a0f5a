"""
Database package for charter operations
"""
from .models import (
    BookingRecord, StaffRecord, CrewAssignmentRecord, InterventionLogRecord,
    DatabaseManager, db_manager
)
from .repository import CharterRepository
from .seed import seed_demo_data

__all__ = [
    'BookingRecord', 'StaffRecord', 'CrewAssignmentRecord', 'InterventionLogRecord',
    'DatabaseManager', 'db_manager', 'CharterRepository', 'seed_demo_data'
]
