"""
Error Log Model
Stores application errors for debugging and monitoring.

Rows are written by emur.services.error_logging.ErrorLogger for unhandled
request failures and forecast worker failures, and are inspected by
administrators through /api/v1/error-logs.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text, Uuid

from emur.models.base import BaseModel, utcnow


class ErrorLog(BaseModel):
    __tablename__ = "error_logs"

    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Classification
    error_type = Column(String(255), nullable=False, index=True)  # e.g. "ForecastAPIError"
    error_code = Column(String(50), nullable=True)  # HTTP status when known
    severity = Column(String(20), default="error", nullable=False)  # warning, error, critical

    # Origin
    module = Column(String(255), nullable=True)
    function = Column(String(255), nullable=True)
    line_number = Column(String(20), nullable=True)

    # Requester (JWT claims), nullable for public routes and the worker
    user_uuid = Column(Uuid(as_uuid=True), nullable=True, index=True)
    user_email = Column(String(255), nullable=True)

    # Request
    request_method = Column(String(10), nullable=True)
    request_path = Column(String(500), nullable=True)
    request_query = Column(Text, nullable=True)
    client_ip = Column(String(50), nullable=True)
    user_agent = Column(String(500), nullable=True)

    message = Column(Text, nullable=False)
    stack_trace = Column(Text, nullable=True)
    context_data = Column(JSON, nullable=True)

    # Resolution tracking
    resolved = Column(Boolean, default=False, nullable=False)
    resolved_at = Column(DateTime(timezone=True), nullable=True)
    resolved_by = Column(Uuid(as_uuid=True), nullable=True)
    resolution_notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<ErrorLog(id={self.id}, type={self.error_type}, message={self.message[:50]}...)>"
