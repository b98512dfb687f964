"""
Error Log Schemas
Admin views over the error_logs table.
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

Severity = Literal["warning", "error", "critical"]


class ErrorLogItem(BaseModel):
    """Row of the error log listing; message is cut to a preview."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    timestamp: datetime
    severity: str
    error_type: str
    message: str
    request_path: Optional[str] = None
    user_email: Optional[str] = None
    resolved: bool


class ErrorLogDetail(ErrorLogItem):
    # Origin of the failure (last traceback frame)
    error_code: Optional[str] = None
    module: Optional[str] = None
    function: Optional[str] = None
    line_number: Optional[str] = None
    stack_trace: Optional[str] = None

    # Requester and request, empty for worker failures
    user_uuid: Optional[UUID] = None
    request_method: Optional[str] = None
    request_query: Optional[str] = None
    client_ip: Optional[str] = None
    user_agent: Optional[str] = None
    context_data: Optional[dict] = None

    resolved_at: Optional[datetime] = None
    resolved_by: Optional[UUID] = None
    resolution_notes: Optional[str] = None
    created_at: datetime


class ErrorLogPage(BaseModel):
    errors: List[ErrorLogItem]
    total: int
    limit: int
    offset: int


class ErrorResolution(BaseModel):
    """
    Example:
        {"resolution_notes": "Provider key rotated"}
    """
    resolution_notes: Optional[str] = None
