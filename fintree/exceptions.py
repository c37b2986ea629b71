"""
Exception hierarchy for fintree.

A lookup miss is not an error: ``find`` returns ``None`` for it.
"""
from typing import Any, Dict, Optional


class FintreeError(Exception):
    """Base class for all fintree errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class TreeFormatError(FintreeError):
    """Seed data does not describe a valid tree."""

    def __init__(self, message: str, path: Optional[str] = None, error: Optional[str] = None):
        details = {"path": path, "error": error}
        super().__init__(message, code="TREE_FORMAT_ERROR", details=details)


class ConfigError(FintreeError):
    """Invalid configuration value."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)
