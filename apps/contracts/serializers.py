from rest_framework import serializers

from apps.contracts.models import ClientContract
from apps.contracts.models import ContractAssignment
from apps.contracts.models import ContractTemplate
from apps.shared.serializers import PaginationQuerySerializer
from apps.workshops.serializers import WorkshopTrainerSerializer

# =============================================================================
# TEMPLATES
# =============================================================================


class ContractTemplateSerializer(serializers.ModelSerializer):
    workshop_date = serializers.DateField(read_only=True)

    class Meta:
        model = ContractTemplate
        fields = ['id', 'workshop_date', 'name', 'type', 'is_volunteer', 'content_markdown', 'created_at', 'updated_at']
        read_only_fields = fields


class ContractTemplateWriteSerializer(serializers.Serializer):
    workshop_date = serializers.DateField()
    name = serializers.CharField(max_length=255)
    type = serializers.ChoiceField(choices=ContractTemplate.Type.choices, default=ContractTemplate.Type.TRAINER)
    is_volunteer = serializers.BooleanField(default=False)
    content_markdown = serializers.CharField(trim_whitespace=False)

    def validate(self, attrs):
        if attrs.get('type') == ContractTemplate.Type.CLIENT and attrs.get('is_volunteer'):
            raise serializers.ValidationError({'is_volunteer': 'Only trainer contracts can be volunteer contracts'})
        return attrs


class ContractTemplateCloneSerializer(serializers.Serializer):
    """Target date is required; every other field defaults to the source template."""

    workshop_date = serializers.DateField()
    name = serializers.CharField(max_length=255, required=False)
    type = serializers.ChoiceField(choices=ContractTemplate.Type.choices, required=False)
    is_volunteer = serializers.BooleanField(required=False)
    content_markdown = serializers.CharField(required=False, trim_whitespace=False)


class ContractTemplateFilterSerializer(serializers.Serializer):
    workshop_date = serializers.DateField(required=False)
    type = serializers.ChoiceField(choices=ContractTemplate.Type.choices, required=False)


class TemplateAssignmentEntrySerializer(serializers.Serializer):
    assignment_id = serializers.IntegerField()
    trainer_id = serializers.IntegerField()
    trainer_code = serializers.CharField()
    contract_accepted = serializers.BooleanField()


class ContractTemplateListItemSerializer(serializers.Serializer):
    def to_representation(self, instance):
        data = ContractTemplateSerializer(instance['template']).data
        data['assignments'] = TemplateAssignmentEntrySerializer(instance['assignments'], many=True).data
        return data


# =============================================================================
# ASSIGNMENTS
# =============================================================================


class ContractAssignmentSerializer(serializers.ModelSerializer):
    trainer = WorkshopTrainerSerializer(read_only=True)
    contract_template_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = ContractAssignment
        fields = ['id', 'trainer', 'contract_template_id', 'created_at']
        read_only_fields = fields


class AssignTrainersSerializer(serializers.Serializer):
    trainer_ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)

    def validate_trainer_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError('Duplicate trainer ids')
        return value


# =============================================================================
# CLIENT CONTRACTS
# =============================================================================


class ClientContractSerializer(serializers.ModelSerializer):
    workshop_date = serializers.DateField(read_only=True)
    contract_template = ContractTemplateSerializer(read_only=True)

    class Meta:
        model = ClientContract
        fields = [
            'id',
            'workshop_date',
            'contract_template',
            'client_company_name',
            'client_representative_name',
            'client_address',
            'client_email',
            'client_company_registration',
            'signature_code',
            'is_signed',
            'signed_at',
            'code_sent',
            'payment_received',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ClientContractWriteSerializer(serializers.Serializer):
    workshop_date = serializers.DateField()
    contract_template_id = serializers.IntegerField(min_value=1)
    client_company_name = serializers.CharField(max_length=255)
    client_representative_name = serializers.CharField(max_length=255)
    client_address = serializers.CharField()
    client_email = serializers.EmailField()
    client_company_registration = serializers.CharField(max_length=64, required=False, allow_blank=True)
    is_signed = serializers.BooleanField(required=False)


class ClientContractListQuerySerializer(PaginationQuerySerializer):
    pass


class AvailableDatesQuerySerializer(serializers.Serializer):
    exclude_contract_id = serializers.IntegerField(required=False, min_value=1)


# =============================================================================
# RENDERING
# =============================================================================


class RenderedContractSerializer(serializers.Serializer):
    template_id = serializers.IntegerField()
    template_name = serializers.CharField()
    content_markdown = serializers.CharField()
    unresolved_placeholders = serializers.ListField(child=serializers.CharField())
