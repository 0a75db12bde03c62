# Generated manually for the initial contracts schema

import django.db.models.deletion
from django.db import migrations
from django.db import models

import apps.shared.utils.codes


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('workshops', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ContractTemplate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('content_markdown', models.TextField(verbose_name='Content (markdown)')),
                (
                    'type',
                    models.CharField(
                        choices=[('trainer', 'Trainer'), ('client', 'Client')],
                        db_index=True,
                        default='trainer',
                        max_length=16,
                        verbose_name='Type',
                    ),
                ),
                ('is_volunteer', models.BooleanField(default=False, verbose_name='Volunteer contract')),
                (
                    'workshop',
                    models.ForeignKey(
                        db_column='workshop_date',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='contract_templates',
                        to='workshops.workshop',
                        to_field='date',
                        verbose_name='Workshop',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Contract template',
                'verbose_name_plural': 'Contract templates',
                'ordering': ['type', '-workshop_id', 'name'],
            },
        ),
        migrations.CreateModel(
            name='ContractAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                (
                    'contract_template',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='assignments',
                        to='contracts.contracttemplate',
                        verbose_name='Contract template',
                    ),
                ),
                (
                    'trainer',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='contract_assignments',
                        to='workshops.workshoptrainer',
                        verbose_name='Trainer',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Contract assignment',
                'verbose_name_plural': 'Contract assignments',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('trainer',), name='unique_contract_assignment_per_trainer'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ClientContract',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('client_company_name', models.CharField(max_length=255, verbose_name='Client company')),
                ('client_representative_name', models.CharField(max_length=255, verbose_name='Client representative')),
                ('client_address', models.TextField(verbose_name='Client address')),
                ('client_email', models.EmailField(max_length=254, verbose_name='Client email')),
                (
                    'client_company_registration',
                    models.CharField(blank=True, max_length=64, verbose_name='SIRET / NDA'),
                ),
                (
                    'signature_code',
                    models.CharField(
                        default=apps.shared.utils.codes.generate_signature_code,
                        max_length=32,
                        unique=True,
                        verbose_name='Signature code',
                    ),
                ),
                ('is_signed', models.BooleanField(default=False, verbose_name='Signed')),
                ('signed_at', models.DateTimeField(blank=True, null=True, verbose_name='Signed at')),
                ('code_sent', models.BooleanField(default=False, verbose_name='Code sent')),
                ('payment_received', models.BooleanField(default=False, verbose_name='Payment received')),
                (
                    'contract_template',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name='client_contracts',
                        to='contracts.contracttemplate',
                        verbose_name='Contract template',
                    ),
                ),
                (
                    'workshop',
                    models.OneToOneField(
                        db_column='workshop_date',
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='client_contract',
                        to='workshops.workshop',
                        to_field='date',
                        verbose_name='Workshop',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Client contract',
                'verbose_name_plural': 'Client contracts',
                'ordering': ['-workshop_id'],
            },
        ),
    ]
