from database.repositories.base import BaseRepository
from database.repositories.template import TemplateRepository
from database.repositories.contract import ContractRepository
from database.repositories.employee import EmployeeRepository
from database.repositories.provisioning import ProvisioningRepository

__all__ = [
    'BaseRepository',
    'TemplateRepository',
    'ContractRepository',
    'EmployeeRepository',
    'ProvisioningRepository',
]
