from .assignment import ContractAssignment
from .client_contract import ClientContract
from .template import ContractTemplate

__all__ = [
    'ClientContract',
    'ContractAssignment',
    'ContractTemplate',
]
