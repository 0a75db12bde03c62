from django.contrib import admin

from .models import TrainerRegistration
from .models import Workshop
from .models import WorkshopGuidelines
from .models import WorkshopTrainer


class WorkshopTrainerInline(admin.TabularInline):
    model = WorkshopTrainer
    extra = 0
    fields = ['trainer_code', 'is_claimed', 'is_abandoned', 'code_sent']


@admin.register(Workshop)
class WorkshopAdmin(admin.ModelAdmin):
    inlines = [WorkshopTrainerInline]
    list_display = ['date', 'password', 'created_at']
    search_fields = ['date']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']


@admin.register(WorkshopTrainer)
class WorkshopTrainerAdmin(admin.ModelAdmin):
    list_display = ['trainer_code', 'workshop', 'is_claimed', 'is_abandoned', 'code_sent']
    list_filter = ['is_claimed', 'is_abandoned', 'code_sent', 'workshop']
    search_fields = ['trainer_code']


@admin.register(TrainerRegistration)
class TrainerRegistrationAdmin(admin.ModelAdmin):
    list_display = ['last_name', 'first_name', 'trainer', 'workshop', 'contract_accepted', 'is_paid', 'registered_at']
    list_filter = ['is_paid', 'contract_accepted', 'workshop']
    search_fields = ['first_name', 'last_name', 'email', 'trainer__trainer_code', 'company_name']
    readonly_fields = ['registered_at', 'created_at', 'updated_at']

    fieldsets = (
        ('Trainer', {'fields': ('workshop', 'trainer', 'first_name', 'last_name', 'phone', 'email')}),
        (
            'Consents',
            {
                'fields': (
                    'privacy_policy_accepted',
                    'image_consent_accepted',
                    'professional_compliance_accepted',
                    'event_guidelines_accepted',
                    'volunteer_attestation_accepted',
                    'contract_accepted',
                ),
                'classes': ('collapse',),
            },
        ),
        (
            'Company',
            {
                'fields': (
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
                ),
                'classes': ('collapse',),
            },
        ),
        ('Documents and payment', {'fields': ('invoice_file_url', 'rib_file_url', 'is_paid')}),
        ('System Fields', {'fields': ('registered_at', 'created_at', 'updated_at'), 'classes': ('collapse',)}),
    )


@admin.register(WorkshopGuidelines)
class WorkshopGuidelinesAdmin(admin.ModelAdmin):
    list_display = ['workshop', 'updated_at']
