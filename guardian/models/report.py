# guardian/models/report.py
from datetime import datetime

from sqlalchemy import Column, Text, DateTime, Integer, SmallInteger, ForeignKey, Index
from sqlalchemy.orm import relationship

from guardian.db import Base


class ActivityReport(Base):
    __tablename__ = "activity_reports"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    # Window start the report covers; not the generation time
    report_date = Column(DateTime, nullable=False)
    total_screen_time = Column(Integer, nullable=False, default=0)
    locations_visited = Column(Integer, nullable=False, default=0)
    calls_made = Column(Integer, nullable=False, default=0)
    sms_sent = Column(Integer, nullable=False, default=0)
    websites_blocked = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False)

    most_used_apps = relationship(
        "ActivityReportApp",
        order_by="ActivityReportApp.rank",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (Index("ix_activity_reports_device_date", "device_id", "report_date"),)


class ActivityReportApp(Base):
    __tablename__ = "activity_report_apps"
    report_id = Column(Integer, ForeignKey("activity_reports.id"), primary_key=True)
    rank = Column(SmallInteger, primary_key=True)  # 1-based
    app_name = Column(Text, nullable=False)
    usage_time = Column(Integer, nullable=False)
