"""
Utility functions for the application.
"""
from typing import Any, Dict


def format_message(message: str, success: bool = None) -> Dict[str, Any]:
    """Format a confirmation response."""
    response: Dict[str, Any] = {}
    if success is not None:
        response["success"] = success
    response["message"] = message
    return response


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response


def describe_validation_errors(errors: list) -> str:
    """Collapse pydantic error entries into a single readable message."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "path", "query", "header")]
        field = ".".join(loc)
        msg = error.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid input"
