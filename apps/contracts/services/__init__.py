from .assignment_service import ContractAssignmentService
from .client_contract_service import ClientContractService
from .rendering_service import ContractRenderingService
from .template_service import ContractTemplateService

__all__ = [
    'ClientContractService',
    'ContractAssignmentService',
    'ContractRenderingService',
    'ContractTemplateService',
]
