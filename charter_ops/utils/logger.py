"""
Structured logging for charter operations
"""
import logging
import sys
import json
import structlog
from datetime import datetime
from typing import Any, Dict, Optional
from charter_ops.config import config

class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for log records"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_obj.update(record.extra_fields)

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)

def setup_logging() -> structlog.BoundLogger:
    """Setup structured logging configuration"""
    json_output = config.logging.format.lower() == "json"
    level = getattr(logging, config.logging.level.upper(), logging.INFO)

    if config.logging.log_file:
        handler = logging.FileHandler(config.logging.log_file)
    else:
        handler = logging.StreamHandler(sys.stdout)

    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(default=str) if json_output
            else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()

class ServiceLogger:
    """Logger for charter coordination services"""

    def __init__(self, service_name: str):
        self.logger = structlog.get_logger(service_name)
        self.service_name = service_name

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def log_task_start(self, task: str, context: Optional[Dict[str, Any]] = None):
        """Log service task start"""
        self.logger.info(
            "Service task started",
            service=self.service_name,
            task=task,
            context=context or {}
        )

    def log_task_complete(self, task: str, result: Dict[str, Any], duration: float):
        """Log service task completion"""
        self.logger.info(
            "Service task completed",
            service=self.service_name,
            task=task,
            result=result,
            duration_ms=round(duration * 1000, 2)
        )

    def log_task_error(self, task: str, error: Exception, context: Optional[Dict[str, Any]] = None):
        """Log service task failure"""
        self.logger.error(
            "Service task failed",
            service=self.service_name,
            task=task,
            error=str(error),
            error_type=type(error).__name__,
            context=context or {},
            exc_info=True
        )

    def log_status_change(self, booking_id: int, old_status: str, new_status: str, phase: Optional[str] = None):
        self.logger.info(
            "Booking status changed",
            service=self.service_name,
            booking_id=booking_id,
            old_status=old_status,
            new_status=new_status,
            phase=phase
        )

    def log_assignment_created(self, assignment_id: str, booking_id: int, captain_id: int, crew_size: int):
        self.logger.info(
            "Crew assignment created",
            service=self.service_name,
            assignment_id=assignment_id,
            booking_id=booking_id,
            captain_id=captain_id,
            crew_size=crew_size
        )

    def log_intervention(self, booking_id: int, action: str, intervention_id: int):
        self.logger.info(
            "Admin intervention logged",
            service=self.service_name,
            booking_id=booking_id,
            action=action,
            intervention_id=intervention_id
        )

    def log_unclassified(self, count: int, booking_ids: list):
        """Bookings whose window and status match no phase"""
        self.logger.info(
            "Bookings outside every phase",
            service=self.service_name,
            count=count,
            booking_ids=booking_ids
        )

# Global logger instance
logger = setup_logging()

def get_service_logger(service_name: str) -> ServiceLogger:
    """Get a specialized logger for a service"""
    return ServiceLogger(service_name)
