from typing import List, Optional

from sqlalchemy import select

from database.models import App, ProvisioningRuleRecord
from database.repositories.base import BaseRepository


class ProvisioningRepository(BaseRepository):
    def get_app(self, app_id: str) -> Optional[App]:
        stmt = select(App).where(App.id == app_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_enabled_apps(self) -> List[App]:
        stmt = select(App).where(App.is_enabled.is_(True)).order_by(App.name.asc())
        return self.db.execute(stmt).scalars().all()

    def get_rules_for_app(self, app_id: str, active_only: bool = False) -> List[ProvisioningRuleRecord]:
        """Rules for an app in ascending priority order."""
        stmt = select(ProvisioningRuleRecord).where(ProvisioningRuleRecord.app_id == app_id)

        if active_only:
            stmt = stmt.where(ProvisioningRuleRecord.is_active.is_(True))

        stmt = stmt.order_by(ProvisioningRuleRecord.priority.asc(), ProvisioningRuleRecord.created_at.asc())
        return self.db.execute(stmt).scalars().all()
