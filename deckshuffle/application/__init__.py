"""
Application layer.

Wraps the core with configuration profiles. The application layer may use the
core; the core never imports from here.

Services:
    ConfigService: named shuffle and logging profiles

Types:
    QueryResult: result of a service query
"""

from .types import ResultStatus, QueryResult
from .config_service import ConfigType, ShuffleConfig, LoggingConfig, ConfigService

__all__ = [
    "ResultStatus",
    "QueryResult",
    "ConfigType",
    "ShuffleConfig",
    "LoggingConfig",
    "ConfigService",
]
