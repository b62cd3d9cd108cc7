"""Order report routes (admin)"""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_now, require_admin
from api.responses import AUTH_ERROR_RESPONSES
from core.date_window import next_orderable_date, parse_order_date
from domain.models import Profile
from domain.schemas.report_schemas import OrderReportResponse
from services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"], responses=AUTH_ERROR_RESPONSES)
logger = logging.getLogger("smartcanteen.api.reports")


def _report_date(
    report_date: Optional[date] = Query(
        None, alias="date", description="Order date (YYYY-MM-DD), defaults to tomorrow"
    ),
    now: datetime = Depends(get_now),
) -> date:
    if report_date is None:
        return parse_order_date(next_orderable_date(now))
    return report_date


@router.get("/orders", response_model=OrderReportResponse)
def order_report(
    report_date: date = Depends(_report_date),
    admin: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Confirmed orders per dish, grouped breakfast, lunch, snack"""
    return ReportService.build_report(db, report_date)


@router.get("/orders/export")
def export_order_report(
    report_date: date = Depends(_report_date),
    admin: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """The order report as a CSV download"""
    report = ReportService.build_report(db, report_date)
    filename = ReportService.csv_filename(report_date)
    logger.info(f"report_exported date={report_date.isoformat()} rows={len(report.items)}")
    return Response(
        content=ReportService.to_csv(report),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
