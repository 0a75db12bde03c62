# Generated manually for the initial workshops schema

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations
from django.db import models

import apps.shared.utils.codes
import apps.workshops.models.workshop


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Workshop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('date', models.DateField(unique=True, verbose_name='Workshop date')),
                (
                    'password',
                    models.CharField(
                        default=apps.shared.utils.codes.generate_workshop_password,
                        help_text='Password participants use to open the workshop tools',
                        max_length=64,
                        verbose_name='Access password',
                    ),
                ),
                (
                    'available_tools',
                    models.JSONField(
                        blank=True,
                        default=apps.workshops.models.workshop.default_available_tools,
                        verbose_name='Available tools',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Workshop',
                'verbose_name_plural': 'Workshops',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='WorkshopTrainer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                (
                    'trainer_code',
                    models.CharField(
                        default=apps.shared.utils.codes.generate_trainer_code,
                        max_length=32,
                        unique=True,
                        verbose_name='Trainer code',
                    ),
                ),
                ('is_claimed', models.BooleanField(default=False, verbose_name='Claimed')),
                ('is_abandoned', models.BooleanField(default=False, verbose_name='Abandoned')),
                ('code_sent', models.BooleanField(default=False, verbose_name='Code sent')),
                (
                    'workshop',
                    models.ForeignKey(
                        db_column='workshop_date',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='trainers',
                        to='workshops.workshop',
                        to_field='date',
                        verbose_name='Workshop',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Workshop trainer',
                'verbose_name_plural': 'Workshop trainers',
                'ordering': ['-workshop_id', 'trainer_code'],
                'indexes': [models.Index(fields=['workshop', 'is_abandoned'], name='trainer_workshop_active_idx')],
            },
        ),
        migrations.CreateModel(
            name='TrainerRegistration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('first_name', models.CharField(max_length=150, verbose_name='First name')),
                ('last_name', models.CharField(max_length=150, verbose_name='Last name')),
                ('phone', models.CharField(blank=True, max_length=40, verbose_name='Phone')),
                ('email', models.EmailField(max_length=254, verbose_name='Email')),
                ('privacy_policy_accepted', models.BooleanField(default=False, verbose_name='Privacy policy accepted')),
                ('image_consent_accepted', models.BooleanField(default=False, verbose_name='Image consent accepted')),
                (
                    'professional_compliance_accepted',
                    models.BooleanField(default=False, verbose_name='Professional compliance accepted'),
                ),
                (
                    'event_guidelines_accepted',
                    models.BooleanField(default=False, verbose_name='Event guidelines accepted'),
                ),
                (
                    'volunteer_attestation_accepted',
                    models.BooleanField(default=False, verbose_name='Volunteer attestation accepted'),
                ),
                (
                    'contract_accepted',
                    models.BooleanField(
                        default=False,
                        help_text='Once accepted the contract assignment of the trainer is locked',
                        verbose_name='Contract accepted',
                    ),
                ),
                (
                    'invoice_file_url',
                    models.CharField(blank=True, max_length=500, verbose_name='Invoice or motivation letter'),
                ),
                ('rib_file_url', models.CharField(blank=True, max_length=500, verbose_name='Bank details (RIB)')),
                ('is_paid', models.BooleanField(default=False, verbose_name='Paid')),
                (
                    'registered_at',
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Registered at'),
                ),
                ('company_name', models.CharField(blank=True, max_length=255, verbose_name='Company name')),
                ('company_legal_form', models.CharField(blank=True, max_length=100, verbose_name='Legal form')),
                ('company_capital', models.CharField(blank=True, max_length=100, verbose_name='Share capital')),
                ('company_rcs', models.CharField(blank=True, max_length=100, verbose_name='RCS city')),
                ('company_rcs_number', models.CharField(blank=True, max_length=100, verbose_name='RCS number')),
                ('company_address', models.TextField(blank=True, verbose_name='Registered office address')),
                ('company_short_name', models.CharField(blank=True, max_length=100, verbose_name='Company short name')),
                (
                    'representative_name',
                    models.CharField(blank=True, max_length=255, verbose_name='Representative name'),
                ),
                (
                    'representative_function',
                    models.CharField(blank=True, max_length=255, verbose_name='Representative function'),
                ),
                (
                    'representative_email',
                    models.EmailField(blank=True, max_length=254, verbose_name='Representative email'),
                ),
                (
                    'trainer',
                    models.ForeignKey(
                        db_column='trainer_code',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='registrations',
                        to='workshops.workshoptrainer',
                        to_field='trainer_code',
                        verbose_name='Trainer',
                    ),
                ),
                (
                    'workshop',
                    models.ForeignKey(
                        db_column='workshop_date',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='registrations',
                        to='workshops.workshop',
                        to_field='date',
                        verbose_name='Workshop',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Trainer registration',
                'verbose_name_plural': 'Trainer registrations',
                'ordering': ['-registered_at'],
                'indexes': [models.Index(fields=['workshop', 'registered_at'], name='registration_workshop_idx')],
            },
        ),
        migrations.CreateModel(
            name='WorkshopGuidelines',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('guidelines_markdown', models.TextField(blank=True, verbose_name='Guidelines (markdown)')),
                (
                    'workshop',
                    models.OneToOneField(
                        db_column='workshop_date',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='guidelines',
                        to='workshops.workshop',
                        to_field='date',
                        verbose_name='Workshop',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Workshop guidelines',
                'verbose_name_plural': 'Workshop guidelines',
                'ordering': ['-workshop_id'],
            },
        ),
    ]
