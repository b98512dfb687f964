"""
Common Schemas
The response envelope shared by every endpoint.

Every JSON response has the shape:

    {"code": 200, "message": "Symptom created", "data": {...}}

except the 401 returned by authentication, which has an empty body.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """
    Standard response envelope.

    Example:
        {
            "code": 400,
            "message": "scale exceeds the symptom maximum",
            "data": null
        }
    """
    code: int = Field(..., description="HTTP status code, repeated in the body")
    message: str = Field(..., description="Human readable outcome")
    data: Optional[Any] = Field(None, description="Payload, null when there is none")


def envelope(code: int, message: str, data: Any = None) -> APIResponse:
    return APIResponse(code=code, message=message, data=data)


class StatusRequest(BaseModel):
    """Body of the admin active/banned toggles: {"status": true}."""
    status: bool
