from django.contrib import admin

from .models import ClientContract
from .models import ContractAssignment
from .models import ContractTemplate


class ContractAssignmentInline(admin.TabularInline):
    model = ContractAssignment
    extra = 0
    raw_id_fields = ['trainer']


@admin.register(ContractTemplate)
class ContractTemplateAdmin(admin.ModelAdmin):
    inlines = [ContractAssignmentInline]
    list_display = ['name', 'type', 'is_volunteer', 'workshop', 'updated_at']
    list_filter = ['type', 'is_volunteer', 'workshop']
    search_fields = ['name']


@admin.register(ClientContract)
class ClientContractAdmin(admin.ModelAdmin):
    list_display = ['client_company_name', 'workshop', 'is_signed', 'code_sent', 'payment_received']
    list_filter = ['is_signed', 'code_sent', 'payment_received']
    search_fields = ['client_company_name', 'client_email', 'signature_code']
    readonly_fields = ['signature_code', 'signed_at', 'created_at', 'updated_at']
