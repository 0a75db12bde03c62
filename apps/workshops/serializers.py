from rest_framework import serializers

from apps.shared.serializers import PaginationQuerySerializer
from apps.workshops.models import TrainerRegistration
from apps.workshops.models import Workshop
from apps.workshops.models import WorkshopGuidelines
from apps.workshops.models import WorkshopTrainer
from apps.workshops.models import default_available_tools

# =============================================================================
# WORKSHOPS
# =============================================================================


class WorkshopSerializer(serializers.ModelSerializer):
    class Meta:
        model = Workshop
        fields = ['id', 'date', 'password', 'available_tools', 'created_at', 'updated_at']
        read_only_fields = fields


class WorkshopWriteSerializer(serializers.Serializer):
    """Blank password means "generate one"; missing tools keep their defaults."""

    date = serializers.DateField()
    password = serializers.CharField(max_length=64, required=False, allow_blank=True)
    available_tools = serializers.DictField(child=serializers.BooleanField(), required=False)

    def validate_available_tools(self, value):
        unknown = set(value) - set(default_available_tools())
        if unknown:
            raise serializers.ValidationError(f'Unknown tools: {", ".join(sorted(unknown))}')
        return value


class ClientContractSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    client_company_name = serializers.CharField()
    is_signed = serializers.BooleanField()
    signed_at = serializers.DateTimeField(allow_null=True)
    code_sent = serializers.BooleanField()
    payment_received = serializers.BooleanField()


class WorkshopStatusSerializer(serializers.Serializer):
    total_trainers = serializers.IntegerField()
    registered_trainers = serializers.IntegerField()
    all_claimed = serializers.BooleanField()
    unpaid_count = serializers.IntegerField()
    all_paid = serializers.BooleanField()


class WorkshopWithStatusSerializer(serializers.Serializer):
    workshop = WorkshopSerializer()
    client_contract = ClientContractSummarySerializer(allow_null=True)
    status = serializers.SerializerMethodField()

    def get_status(self, obj) -> dict:
        return WorkshopStatusSerializer(obj['status'].as_dict()).data


class WorkshopStatusQuerySerializer(serializers.Serializer):
    generation = serializers.CharField(required=False, allow_blank=True, max_length=64)


# =============================================================================
# TRAINERS
# =============================================================================


class WorkshopTrainerSerializer(serializers.ModelSerializer):
    workshop_date = serializers.DateField(read_only=True)

    class Meta:
        model = WorkshopTrainer
        fields = ['id', 'workshop_date', 'trainer_code', 'is_claimed', 'is_abandoned', 'code_sent', 'created_at']
        read_only_fields = fields


class AssignmentSummarySerializer(serializers.Serializer):
    assignment_id = serializers.IntegerField()
    template_id = serializers.IntegerField()
    template_name = serializers.CharField()
    is_volunteer = serializers.BooleanField()


class TrainerListItemSerializer(serializers.Serializer):
    trainer = WorkshopTrainerSerializer()
    assignment = AssignmentSummarySerializer(allow_null=True)


class WorkshopTrainerWriteSerializer(serializers.Serializer):
    """Blank trainer code means "generate one"."""

    workshop_date = serializers.DateField()
    trainer_code = serializers.CharField(max_length=32, required=False, allow_blank=True)
    is_claimed = serializers.BooleanField(required=False)
    is_abandoned = serializers.BooleanField(required=False)
    code_sent = serializers.BooleanField(required=False)


class WorkshopDateFilterSerializer(serializers.Serializer):
    workshop_date = serializers.DateField(required=False)


# =============================================================================
# REGISTRATIONS
# =============================================================================


class TrainerRegistrationSerializer(serializers.ModelSerializer):
    workshop_date = serializers.DateField(read_only=True)
    trainer_code = serializers.CharField(read_only=True)

    class Meta:
        model = TrainerRegistration
        fields = [
            'id',
            'workshop_date',
            'trainer_code',
            'first_name',
            'last_name',
            'phone',
            'email',
            'privacy_policy_accepted',
            'image_consent_accepted',
            'professional_compliance_accepted',
            'event_guidelines_accepted',
            'volunteer_attestation_accepted',
            'contract_accepted',
            'invoice_file_url',
            'rib_file_url',
            'is_paid',
            'registered_at',
            'company_name',
            'company_legal_form',
            'company_capital',
            'company_rcs',
            'company_rcs_number',
            'company_address',
            'company_short_name',
            'representative_name',
            'representative_function',
            'representative_email',
        ]
        read_only_fields = fields


class ContractInfoSerializer(serializers.Serializer):
    template_id = serializers.IntegerField()
    name = serializers.CharField()
    is_volunteer = serializers.BooleanField()


class RegistrationDocumentsSerializer(serializers.Serializer):
    invoice_url = serializers.URLField(allow_null=True)
    rib_url = serializers.URLField(allow_null=True)
    motivation_letter_available = serializers.BooleanField()


class RegistrationListItemSerializer(serializers.Serializer):
    """A registration flattened with its contract info and signed document links."""

    def to_representation(self, instance):
        data = TrainerRegistrationSerializer(instance['registration']).data
        contract_info = instance['contract_info']
        data['contract_info'] = ContractInfoSerializer(contract_info).data if contract_info else None
        data['documents'] = RegistrationDocumentsSerializer(instance['documents']).data
        return data


class RegistrationListQuerySerializer(PaginationQuerySerializer, WorkshopDateFilterSerializer):
    pass


# =============================================================================
# GUIDELINES
# =============================================================================


class WorkshopGuidelinesSerializer(serializers.ModelSerializer):
    workshop_date = serializers.DateField(read_only=True)

    class Meta:
        model = WorkshopGuidelines
        fields = ['id', 'workshop_date', 'guidelines_markdown', 'created_at', 'updated_at']
        read_only_fields = fields


class WorkshopGuidelinesWriteSerializer(serializers.Serializer):
    workshop_date = serializers.DateField()
    guidelines_markdown = serializers.CharField(allow_blank=True, trim_whitespace=False)
