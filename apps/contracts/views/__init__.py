from .client_contract_views import ClientContractAvailableDatesAPIView
from .client_contract_views import ClientContractCreateAPIView
from .client_contract_views import ClientContractDeleteAPIView
from .client_contract_views import ClientContractDetailAPIView
from .client_contract_views import ClientContractListAPIView
from .client_contract_views import ClientContractRegenerateCodeAPIView
from .client_contract_views import ClientContractRenderAPIView
from .client_contract_views import ClientContractSendCodeAPIView
from .client_contract_views import ClientContractToggleCodeSentAPIView
from .client_contract_views import ClientContractTogglePaymentAPIView
from .client_contract_views import ClientContractUpdateAPIView
from .template_views import AssignmentDeleteAPIView
from .template_views import TemplateAssignAPIView
from .template_views import TemplateAssignmentListAPIView
from .template_views import TemplateAvailableTrainersAPIView
from .template_views import TemplateCloneAPIView
from .template_views import TemplateCreateAPIView
from .template_views import TemplateDeleteAPIView
from .template_views import TemplateDetailAPIView
from .template_views import TemplateListAPIView
from .template_views import TemplateUpdateAPIView

__all__ = [
    'AssignmentDeleteAPIView',
    'ClientContractAvailableDatesAPIView',
    'ClientContractCreateAPIView',
    'ClientContractDeleteAPIView',
    'ClientContractDetailAPIView',
    'ClientContractListAPIView',
    'ClientContractRegenerateCodeAPIView',
    'ClientContractRenderAPIView',
    'ClientContractSendCodeAPIView',
    'ClientContractToggleCodeSentAPIView',
    'ClientContractTogglePaymentAPIView',
    'ClientContractUpdateAPIView',
    'TemplateAssignAPIView',
    'TemplateAssignmentListAPIView',
    'TemplateAvailableTrainersAPIView',
    'TemplateCloneAPIView',
    'TemplateCreateAPIView',
    'TemplateDeleteAPIView',
    'TemplateDetailAPIView',
    'TemplateListAPIView',
    'TemplateUpdateAPIView',
]
