import logging

from sqlalchemy.orm import Session

from database.repositories import (
    TemplateRepository,
    ContractRepository,
    EmployeeRepository,
    ProvisioningRepository,
)

logger = logging.getLogger(__name__)


class HrRepository:
    """Groups the per-aggregate repositories around one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.templates = TemplateRepository(db)
        self.contracts = ContractRepository(db)
        self.employees = EmployeeRepository(db)
        self.provisioning = ProvisioningRepository(db)
