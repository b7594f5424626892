from .base import Base, JSONType, new_id
from .template import ContractTemplate
from .contract import Contract
from .employee import Employee
from .app import App, ProvisioningRuleRecord

__all__ = [
    'Base',
    'JSONType',
    'new_id',
    'ContractTemplate',
    'Contract',
    'Employee',
    'App',
    'ProvisioningRuleRecord',
]
