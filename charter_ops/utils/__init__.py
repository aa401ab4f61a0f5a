"""
Utility modules for charter operations
"""
from .logger import logger, get_service_logger, ServiceLogger

__all__ = ['logger', 'get_service_logger', 'ServiceLogger']
