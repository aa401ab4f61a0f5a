"""
Configuration management for charter operations
"""
import os
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_ASSIGNMENT_STATUSES = {"planned", "confirmed", "in_progress", "completed", "cancelled"}

@dataclass
class DatabaseConfig:
    """Database configuration"""
    url: str = "sqlite:///./charter_ops.db"

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "json"
    log_file: Optional[str] = None

@dataclass
class AppConfig:
    """Web application configuration"""
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class CharterConfig:
    """Charter lifecycle and crew assignment settings"""
    refetch_interval_seconds: int = 30
    briefing_lead_minutes: int = 0
    default_assignment_status: str = "planned"

class Config:
    """Central configuration manager"""
    
    def __init__(self):
        self.database = DatabaseConfig(
            url=os.getenv('DATABASE_URL', 'sqlite:///./charter_ops.db')
        )
        
        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO'),
            format=os.getenv('LOG_FORMAT', 'json'),
            log_file=os.getenv('LOG_FILE')
        )
        
        self.app = AppConfig(
            debug=os.getenv('DEBUG', 'False').lower() == 'true',
            host=os.getenv('HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', '8000'))
        )
        
        self.charter = CharterConfig(
            refetch_interval_seconds=int(os.getenv('REFETCH_INTERVAL_SECONDS', '30')),
            briefing_lead_minutes=int(os.getenv('BRIEFING_LEAD_MINUTES', '0')),
            default_assignment_status=os.getenv('DEFAULT_ASSIGNMENT_STATUS', 'planned')
        )
    
    def validate(self) -> bool:
        """Validate configuration"""
        if self.charter.refetch_interval_seconds <= 0:
            return False
        if self.charter.briefing_lead_minutes < 0:
            return False
        if self.charter.default_assignment_status not in VALID_ASSIGNMENT_STATUSES:
            return False
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            return False
        return True

# Global configuration instance
config = Config()
