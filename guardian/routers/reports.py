# guardian/routers/reports.py
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from guardian.deps import get_report_builder
from guardian.schemas.common import to_naive_utc
from guardian.schemas.report import ActivityReport
from guardian.services.report_builder import ReportBuilder

router = APIRouter()


@router.post("/{device_id}", response_model=ActivityReport, status_code=201)
def generate_report(
    device_id: int,
    start: datetime,
    end: datetime,
    builder: ReportBuilder = Depends(get_report_builder),
):
    """Aggregate [start, end) into a new report. Regenerating never overwrites."""
    return builder.generate(device_id, to_naive_utc(start), to_naive_utc(end))


@router.get("/{device_id}", response_model=List[ActivityReport])
def list_reports(
    device_id: int,
    start: datetime,
    end: datetime,
    builder: ReportBuilder = Depends(get_report_builder),
):
    return builder.list(device_id, to_naive_utc(start), to_naive_utc(end))
