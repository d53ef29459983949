"""
Status envelope shared by every endpoint.

Responses always have the shape ``{status, message?, data?}`` where
``status`` is ``"success"`` or ``"fail"``.  Keys without a value are
left out rather than sent as ``null``.
"""

from typing import Any, Dict, Optional


def success(message: Optional[str] = None, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a success envelope."""
    body: Dict[str, Any] = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def fail(message: str) -> Dict[str, Any]:
    """Build a fail envelope."""
    return {"status": "fail", "message": message}
