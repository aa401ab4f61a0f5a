"""
Custom exceptions for charter operations
"""

class CharterOpsException(Exception):
    """Base exception for the charter operations core"""
    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "GENERIC_ERROR"
        self.context = context or {}

class DataValidationException(CharterOpsException):
    """Exception raised when data validation fails"""
    pass

class ConfigurationException(CharterOpsException):
    """Exception related to configuration issues"""
    pass

class NotFoundException(CharterOpsException):
    """Exception raised when a referenced record does not exist"""
    pass

class BookingNotFoundException(NotFoundException):
    pass

class AssignmentNotFoundException(NotFoundException):
    pass

class ConflictException(CharterOpsException):
    """Exception raised when the store rejects a write that conflicts with existing data"""
    pass

class AssignmentConflictException(ConflictException):
    """A crew assignment already exists for the booking"""
    pass

class DatabaseException(CharterOpsException):
    """Exception related to database operations"""
    pass
