import logging
from typing import Any

from django.db import transaction
from django.utils import timezone

from apps.contracts.dal.client_contract_dal import ClientContractDAL
from apps.contracts.dal.template_dal import ContractTemplateDAL
from apps.contracts.exceptions import ClientContractExistsError
from apps.contracts.exceptions import InvalidTemplateTypeError
from apps.contracts.models import ClientContract
from apps.contracts.models import ContractTemplate
from apps.contracts.tasks import send_signature_code_email_task
from apps.contracts.templating import format_long_date
from apps.contracts.utils import format_company_registration
from apps.shared.utils.codes import generate_signature_code
from apps.shared.utils.paginator import ServicePaginator
from apps.workshops.dal.workshop_dal import WorkshopDAL

logger = logging.getLogger(__name__)


class ClientContractService:
    """Service for the client contract of each workshop (at most one per date)"""

    def __init__(self, dal=None, template_dal=None, workshop_dal=None, paginator=None):
        self.dal = dal or ClientContractDAL()
        self.template_dal = template_dal or ContractTemplateDAL()
        self.workshop_dal = workshop_dal or WorkshopDAL()
        self.paginator = paginator or ServicePaginator()

    def list_client_contracts(self, page: int = 1, page_size: int | None = None) -> dict[str, Any]:
        return self.paginator.paginate(self.dal.get_client_contracts_queryset(), page, page_size)

    def get_client_contract(self, contract_id: int) -> ClientContract:
        return self.dal.get_client_contract_by_id(contract_id)

    def available_workshop_dates(self, exclude_contract_id: int | None = None) -> list:
        """Workshop dates that have no client contract yet, newest first."""
        contracted = self.dal.get_contracted_dates(exclude_id=exclude_contract_id)
        dates = self.workshop_dal.get_workshops_queryset().values_list('date', flat=True)
        return [workshop_date for workshop_date in dates if workshop_date not in contracted]

    @transaction.atomic
    def create_client_contract(self, validated_data: dict[str, Any]) -> ClientContract:
        data = validated_data.copy()
        workshop = self.workshop_dal.get_workshop_by_date(data.pop('workshop_date'))
        if self.dal.workshop_has_contract(workshop.date):
            raise ClientContractExistsError(workshop.date)

        data['workshop'] = workshop
        data['contract_template'] = self._get_client_template(data.pop('contract_template_id'))
        data['client_company_registration'] = format_company_registration(
            data.get('client_company_registration', '')
        )

        contract = self.dal.create_client_contract(data)
        logger.info(f'Client contract {contract.id} created for workshop {workshop.date}')
        return contract

    @transaction.atomic
    def update_client_contract(self, contract_id: int, validated_data: dict[str, Any]) -> ClientContract:
        contract = self.dal.get_client_contract_by_id(contract_id)
        data = validated_data.copy()

        workshop_date = data.pop('workshop_date', None)
        if workshop_date is not None and workshop_date != contract.workshop_id:
            if self.dal.workshop_has_contract(workshop_date, exclude_id=contract.id):
                raise ClientContractExistsError(workshop_date)
            data['workshop'] = self.workshop_dal.get_workshop_by_date(workshop_date)

        if 'contract_template_id' in data:
            data['contract_template'] = self._get_client_template(data.pop('contract_template_id'))
        if 'client_company_registration' in data:
            data['client_company_registration'] = format_company_registration(data['client_company_registration'])

        is_signed = data.get('is_signed')
        if is_signed is not None and is_signed != contract.is_signed:
            data['signed_at'] = timezone.now() if is_signed else None
            logger.info(f'Client contract {contract_id} marked as {"signed" if is_signed else "unsigned"}')

        return self.dal.update_client_contract(contract, data)

    def delete_client_contract(self, contract_id: int) -> bool:
        contract = self.dal.get_client_contract_by_id(contract_id)
        result = self.dal.delete_client_contract(contract)
        logger.info(f'Client contract {contract_id} deleted')
        return result

    def toggle_code_sent(self, contract_id: int) -> ClientContract:
        contract = self.dal.get_client_contract_by_id(contract_id)
        return self.dal.update_client_contract(contract, {'code_sent': not contract.code_sent})

    def toggle_payment_received(self, contract_id: int) -> ClientContract:
        contract = self.dal.get_client_contract_by_id(contract_id)
        updated = self.dal.update_client_contract(contract, {'payment_received': not contract.payment_received})
        logger.info(f'Client contract {contract_id} payment received: {updated.payment_received}')
        return updated

    @transaction.atomic
    def send_signature_code(self, contract_id: int) -> ClientContract:
        """Queue the email carrying the signature code and mark the code as sent."""
        contract = self.dal.get_client_contract_by_id(contract_id)
        contract = self.dal.update_client_contract(contract, {'code_sent': True})

        email = contract.client_email
        representative_name = contract.client_representative_name
        signature_code = contract.signature_code
        workshop_date = format_long_date(contract.workshop_date)
        transaction.on_commit(
            lambda: send_signature_code_email_task.delay(email, representative_name, signature_code, workshop_date)
        )
        logger.info(f'Signature code email queued for client contract {contract_id}')
        return contract

    @transaction.atomic
    def regenerate_signature_code(self, contract_id: int) -> ClientContract:
        """
        Replace the signature code with a fresh one.

        The previous code stops working, so ``code_sent`` is reset until the
        new code is sent.
        """
        contract = self.dal.get_client_contract_by_id(contract_id)
        signature_code = generate_signature_code()
        while signature_code == contract.signature_code or self.dal.signature_code_exists(signature_code):
            signature_code = generate_signature_code()

        updated = self.dal.update_client_contract(contract, {'signature_code': signature_code, 'code_sent': False})
        logger.info(f'Signature code regenerated for client contract {contract_id}')
        return updated

    def _get_client_template(self, template_id: int) -> ContractTemplate:
        template = self.template_dal.get_template_by_id(template_id)
        if template.type != ContractTemplate.Type.CLIENT:
            raise InvalidTemplateTypeError(ContractTemplate.Type.CLIENT, template.type)
        return template
