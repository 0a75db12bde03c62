import factory

from apps.contracts.models import ClientContract
from apps.contracts.models import ContractAssignment
from apps.contracts.models import ContractTemplate
from apps.workshops.tests.factories import WorkshopFactory
from apps.workshops.tests.factories import WorkshopTrainerFactory


class ContractTemplateFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContractTemplate

    workshop = factory.SubFactory(WorkshopFactory)
    name = factory.Sequence(lambda n: f'Contrat formateur {n}')
    type = ContractTemplate.Type.TRAINER
    is_volunteer = False
    content_markdown = 'Entre [NOM_ENTREPRISE], représentée par [NOM_REPRESENTANT], le [DATE_DU_JOUR].'


class VolunteerTemplateFactory(ContractTemplateFactory):
    name = factory.Sequence(lambda n: f'Contrat bénévole {n}')
    is_volunteer = True


class ClientTemplateFactory(ContractTemplateFactory):
    name = factory.Sequence(lambda n: f'Contrat client {n}')
    type = ContractTemplate.Type.CLIENT
    content_markdown = 'Client : [CLIENT_COMPANY_NAME] ([CLIENT_COMPANY_REGISTRATION]), atelier du [WORKSHOP_DATE].'


class ContractAssignmentFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContractAssignment

    trainer = factory.SubFactory(WorkshopTrainerFactory)
    contract_template = factory.SubFactory(
        ContractTemplateFactory, workshop=factory.SelfAttribute('..trainer.workshop')
    )


class ClientContractFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ClientContract

    workshop = factory.SubFactory(WorkshopFactory)
    contract_template = factory.SubFactory(ClientTemplateFactory, workshop=factory.SelfAttribute('..workshop'))
    client_company_name = 'Acme Formation'
    client_representative_name = 'Jean Martin'
    client_address = '3 place Bellecour, 69002 Lyon'
    client_email = factory.Faker('email')
    client_company_registration = 'SIRET 12345678900012'
