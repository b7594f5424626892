"""Business logic services."""

from .template_service import TemplateService
from .contract_service import ContractService
from .provisioning_service import ProvisioningApiService
