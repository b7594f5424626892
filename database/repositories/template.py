import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select, func

from database.models import ContractTemplate, Contract
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TemplateRepository(BaseRepository):
    def get_by_id(self, template_id: str) -> Optional[ContractTemplate]:
        stmt = select(ContractTemplate).where(ContractTemplate.id == template_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_templates(
        self,
        include_inactive: bool = False,
        employment_type: Optional[str] = None
    ) -> List[ContractTemplate]:
        stmt = select(ContractTemplate)

        if not include_inactive:
            stmt = stmt.where(ContractTemplate.is_active.is_(True))

        if employment_type:
            stmt = stmt.where(ContractTemplate.employment_type == employment_type)

        stmt = stmt.order_by(ContractTemplate.name.asc())
        return self.db.execute(stmt).scalars().all()

    def create_template(
        self,
        template_id: str,
        name: str,
        body_markdown: str,
        body_html: str,
        variable_schema: Dict[str, Any],
        employment_type: Optional[str] = None,
        description: Optional[str] = None
    ) -> ContractTemplate:
        template = ContractTemplate(
            id=template_id,
            name=name,
            description=description,
            employment_type=employment_type,
            body_markdown=body_markdown,
            body_html=body_html,
            variable_schema=variable_schema,
            is_active=True,
        )
        return self.add(template)

    def count_contracts(self, template_id: str) -> int:
        stmt = select(func.count(Contract.id)).where(Contract.template_id == template_id)
        return self.db.execute(stmt).scalar_one()

    def delete_or_deactivate(self, template: ContractTemplate) -> bool:
        """
        Delete a template, or deactivate it when contracts reference it.

        Returns:
            True if the template was deleted, False if it was deactivated.
        """
        in_use = self.count_contracts(template.id)
        if in_use > 0:
            template.is_active = False
            self.db.flush()
            logger.info(f"Deactivated template {template.id} (referenced by {in_use} contracts)")
            return False

        self.delete(template)
        logger.info(f"Deleted template {template.id}")
        return True
