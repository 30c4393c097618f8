"""
Error types raised by uptime-demo
"""
from typing import Any, Dict, Optional


class UptimeDemoError(Exception):
    """Base class for uptime-demo errors"""

    def __init__(self, message: str, metadata: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.metadata = metadata or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "metadata": self.metadata,
        }


class ConfigurationError(UptimeDemoError, ValueError):
    """Invalid emitter configuration (steps, delay, start index, preset)"""


class RunConsumedError(UptimeDemoError, RuntimeError):
    """A counter run was iterated more than once"""
