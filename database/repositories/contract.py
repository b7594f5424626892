from typing import List, Optional, Dict, Any

from sqlalchemy import select

from database.models import Contract
from database.repositories.base import BaseRepository


class ContractRepository(BaseRepository):
    def get_by_id(self, contract_id: str) -> Optional[Contract]:
        stmt = select(Contract).where(Contract.id == contract_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_employee(self, employee_id: str) -> List[Contract]:
        stmt = (
            select(Contract)
            .where(Contract.employee_id == employee_id)
            .order_by(Contract.created_at.desc())
        )
        return self.db.execute(stmt).scalars().all()

    def create_contract(
        self,
        template_id: str,
        variables: Dict[str, Any],
        body_markdown: str,
        body_html: str,
        unresolved_placeholders: Optional[List[str]] = None,
        employee_id: Optional[str] = None,
        candidate_name: Optional[str] = None,
        candidate_email: Optional[str] = None,
        status: str = 'draft'
    ) -> Contract:
        contract = Contract(
            template_id=template_id,
            employee_id=employee_id,
            candidate_name=candidate_name,
            candidate_email=candidate_email,
            variables=dict(variables),
            body_markdown=body_markdown,
            body_html=body_html,
            unresolved_placeholders=list(unresolved_placeholders or []),
            status=status,
        )
        return self.add(contract)
