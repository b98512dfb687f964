"""
Error Logs API Endpoints

Admin-only endpoints for viewing and resolving error logs.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_admin
from emur.core.constants import DEFAULT_PAGE_SIZE
from emur.core.exceptions import NotFoundError
from emur.db.session import get_db
from emur.models.base import utcnow
from emur.models.error_log import ErrorLog
from emur.schemas.common import APIResponse, envelope
from emur.schemas.error_log import ErrorLogDetail, ErrorLogItem, ErrorLogPage, ErrorResolution, Severity
from emur.services.auth_service import TokenClaims


router = APIRouter(prefix="/error-logs", dependencies=[Depends(require_admin)])

MESSAGE_PREVIEW_LENGTH = 200


def _get_or_404(db: Session, error_id: int) -> ErrorLog:
    error = db.query(ErrorLog).filter(ErrorLog.id == error_id).first()
    if not error:
        raise NotFoundError("error log not found")
    return error


@router.get("", response_model=APIResponse)
def get_error_logs(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    offset: int = Query(0, ge=0),
    severity: Optional[Severity] = Query(None, description="Filter by severity"),
    error_type: Optional[str] = Query(None, description="Filter by error type"),
    resolved: Optional[bool] = Query(None, description="Filter by resolved status"),
    db: Session = Depends(get_db),
):
    """
    Get error logs, most recent first (admin only).
    """
    query = db.query(ErrorLog)

    if severity:
        query = query.filter(ErrorLog.severity == severity)
    if error_type:
        query = query.filter(ErrorLog.error_type.ilike(f"%{error_type}%"))
    if resolved is not None:
        query = query.filter(ErrorLog.resolved == resolved)

    total = query.count()
    errors = query.order_by(ErrorLog.timestamp.desc()).offset(offset).limit(limit).all()

    summaries = []
    for e in errors:
        summary = ErrorLogItem.model_validate(e)
        if len(summary.message) > MESSAGE_PREVIEW_LENGTH:
            summary.message = summary.message[:MESSAGE_PREVIEW_LENGTH] + "..."
        summaries.append(summary)

    return envelope(
        status.HTTP_200_OK,
        "Error logs retrieved successfully",
        ErrorLogPage(errors=summaries, total=total, limit=limit, offset=offset),
    )


@router.get("/{error_id}", response_model=APIResponse)
def get_error_log(error_id: int, db: Session = Depends(get_db)):
    error = _get_or_404(db, error_id)
    return envelope(status.HTTP_200_OK, "Error log retrieved successfully", ErrorLogDetail.model_validate(error))


@router.put("/{error_id}/resolve", response_model=APIResponse)
def resolve_error(
    error_id: int,
    data: ErrorResolution,
    claims: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Mark an error as resolved (admin only).
    """
    error = _get_or_404(db, error_id)

    error.resolved = True
    error.resolved_at = utcnow()
    error.resolved_by = claims.user_uuid
    error.resolution_notes = data.resolution_notes

    db.commit()
    db.refresh(error)

    return envelope(status.HTTP_200_OK, "Error log resolved", ErrorLogDetail.model_validate(error))
