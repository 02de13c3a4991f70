# guardian/stores/alerts.py
from datetime import datetime
from typing import List

from guardian.models.telemetry import EmergencyAlert
from guardian.schemas.telemetry import EmergencyAlertCreate, EmergencyAlertOut
from guardian.services.errors import AlertNotFound
from guardian.stores.base import SessionStore, store_call


class AlertStore(SessionStore):
    def create(self, device_id: int, payload: EmergencyAlertCreate) -> EmergencyAlertOut:
        with store_call(self.db, "alert.create"):
            row = EmergencyAlert(
                device_id=device_id,
                category=payload.category,
                message=payload.message,
                latitude=payload.latitude,
                longitude=payload.longitude,
            )
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return EmergencyAlertOut.model_validate(row)

    def list_for_device(self, device_id: int, unresolved_only: bool = False) -> List[EmergencyAlertOut]:
        with store_call(self.db, "alert.list_for_device"):
            query = self.db.query(EmergencyAlert).filter(EmergencyAlert.device_id == device_id)
            if unresolved_only:
                query = query.filter(EmergencyAlert.is_resolved == False)  # noqa: E712
            rows = query.order_by(EmergencyAlert.created_at.desc(), EmergencyAlert.id.desc()).all()
            return [EmergencyAlertOut.model_validate(r) for r in rows]

    def resolve(self, alert_id: int) -> EmergencyAlertOut:
        """Mark an alert resolved. resolved_at is only ever set on the first call."""
        with store_call(self.db, "alert.resolve"):
            row = self.db.query(EmergencyAlert).filter(EmergencyAlert.id == alert_id).first()
            if row is None:
                raise AlertNotFound(alert_id)
            if not row.is_resolved:
                row.is_resolved = True
                row.resolved_at = datetime.utcnow()
                self.db.commit()
                self.db.refresh(row)
            return EmergencyAlertOut.model_validate(row)
