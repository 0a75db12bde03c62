from typing import Any

from django.db.models import QuerySet

from apps.contracts.exceptions import ClientContractNotFoundError
from apps.contracts.models import ClientContract
from apps.shared.decorators.database import handle_db_errors


class ClientContractDAL:
    """Data Access Layer for ClientContract model operations only"""

    @handle_db_errors(operation_type='create', model_name='ClientContract')
    def create_client_contract(self, contract_data: dict[str, Any]) -> ClientContract:
        return ClientContract.objects.create(**contract_data)

    @handle_db_errors(operation_type='read', model_name='ClientContract')
    def get_client_contract_by_id(self, contract_id: int) -> ClientContract:
        try:
            return ClientContract.objects.select_related('contract_template').get(id=contract_id)
        except ClientContract.DoesNotExist:
            raise ClientContractNotFoundError(contract_identifier=contract_id)

    def get_client_contracts_queryset(self) -> QuerySet[ClientContract]:
        return ClientContract.objects.select_related('contract_template').order_by('-workshop_id')

    def get_client_contracts_by_date(self, workshop_dates: list) -> dict:
        """Client contract per workshop date, for the given dates only."""
        queryset = ClientContract.objects.filter(workshop_id__in=workshop_dates)
        return {contract.workshop_id: contract for contract in queryset}

    def get_contracted_dates(self, exclude_id: int | None = None) -> set:
        queryset = ClientContract.objects.all()
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return set(queryset.values_list('workshop_id', flat=True))

    def workshop_has_contract(self, workshop_date, exclude_id: int | None = None) -> bool:
        queryset = ClientContract.objects.filter(workshop_id=workshop_date)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def signature_code_exists(self, signature_code: str) -> bool:
        return ClientContract.objects.filter(signature_code=signature_code).exists()

    @handle_db_errors(operation_type='update', model_name='ClientContract')
    def update_client_contract(self, contract: ClientContract, validated_data: dict[str, Any]) -> ClientContract:
        for field, value in validated_data.items():
            setattr(contract, field, value)
        contract.save()
        return contract

    @handle_db_errors(operation_type='delete', model_name='ClientContract')
    def delete_client_contract(self, contract: ClientContract) -> bool:
        contract.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='ClientContract')
    def delete_client_contract_for_workshop(self, workshop_date) -> int:
        deleted, _ = ClientContract.objects.filter(workshop_id=workshop_date).delete()
        return deleted
