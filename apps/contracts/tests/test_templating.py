from datetime import date
from datetime import datetime
from datetime import timezone as dt_timezone
from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.contracts.templating import PENDING_SIGNATURE_STATUS
from apps.contracts.templating import Placeholder
from apps.contracts.templating import build_client_context
from apps.contracts.templating import build_trainer_context
from apps.contracts.templating import format_long_date
from apps.contracts.templating import resolve
from apps.contracts.templating import signature_status
from apps.contracts.templating import unresolved_placeholders
from apps.contracts.utils import format_company_registration

TODAY = date(2026, 10, 19)


def client_contract(**overrides):
    values = {
        'client_company_name': 'Acme Formation',
        'client_representative_name': 'Jean Martin',
        'client_address': '3 place Bellecour, 69002 Lyon',
        'client_email': 'jean@acme.fr',
        'client_company_registration': 'SIRET 12345678900012',
        'signature_code': 'CLIENT-AB12CD34',
        'workshop_date': date(2026, 11, 5),
        'is_signed': False,
        'signed_at': None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class ResolveTest(SimpleTestCase):
    def test_fills_tokens_and_today(self):
        text = resolve(
            'Entre [NOM_ENTREPRISE] et nous, le [DATE_DU_JOUR].',
            {Placeholder.NOM_ENTREPRISE: 'Formations Durand'},
            kind='trainer',
            today=TODAY,
        )
        self.assertEqual(text, 'Entre Formations Durand et nous, le 19 octobre 2026.')

    def test_replaces_every_occurrence(self):
        text = resolve(
            '[CLIENT_EMAIL] / [CLIENT_EMAIL]', {Placeholder.CLIENT_EMAIL: 'a@b.fr'}, kind='client', today=TODAY
        )
        self.assertEqual(text, 'a@b.fr / a@b.fr')

    def test_values_are_not_expanded_again(self):
        text = resolve(
            '[NOM_ENTREPRISE]',
            {Placeholder.NOM_ENTREPRISE: 'Société [NOM_REPRESENTANT]', Placeholder.NOM_REPRESENTANT: 'Claire'},
            kind='trainer',
            today=TODAY,
        )
        self.assertEqual(text, 'Société [NOM_REPRESENTANT]')

    def test_missing_values_stay_verbatim(self):
        text = resolve('[NOM_ENTREPRISE] - [ADRESSE_SIEGE]', {Placeholder.NOM_ENTREPRISE: None}, today=TODAY)
        self.assertEqual(text, '[NOM_ENTREPRISE] - [ADRESSE_SIEGE]')

    def test_vocabulary_is_restricted_by_kind(self):
        context = {Placeholder.NOM_ENTREPRISE: 'Durand', Placeholder.CLIENT_EMAIL: 'a@b.fr'}

        trainer_text = resolve('[NOM_ENTREPRISE] [CLIENT_EMAIL]', context, kind='trainer', today=TODAY)
        client_text = resolve('[NOM_ENTREPRISE] [CLIENT_EMAIL]', context, kind='client', today=TODAY)

        self.assertEqual(trainer_text, 'Durand [CLIENT_EMAIL]')
        self.assertEqual(client_text, '[NOM_ENTREPRISE] a@b.fr')

    def test_today_cannot_be_overridden(self):
        text = resolve('[DATE_DU_JOUR]', {Placeholder.DATE_DU_JOUR: 'hier'}, today=TODAY)
        self.assertEqual(text, '19 octobre 2026')

    def test_unknown_tokens_and_plain_brackets_are_untouched(self):
        text = resolve('[INCONNU] [voir annexe] [NOM_ENTREPRISE]', {'NOM_ENTREPRISE': 'Durand'}, today=TODAY)
        self.assertEqual(text, '[INCONNU] [voir annexe] Durand')

    def test_empty_template(self):
        self.assertEqual(resolve('', {}, today=TODAY), '')


class UnresolvedPlaceholdersTest(SimpleTestCase):
    def test_reports_known_tokens_once_in_order(self):
        text = '[ADRESSE_SIEGE] [INCONNU] [NOM_ENTREPRISE] [ADRESSE_SIEGE]'
        self.assertEqual(unresolved_placeholders(text), ['ADRESSE_SIEGE', 'NOM_ENTREPRISE'])

    def test_nothing_left(self):
        self.assertEqual(unresolved_placeholders('Contrat complet.'), [])


class ContextBuildersTest(SimpleTestCase):
    def test_trainer_context_skips_blank_fields(self):
        registration = SimpleNamespace(company_name='Durand', company_address='', representative_name='Claire')

        context = build_trainer_context(registration)

        self.assertEqual(context[Placeholder.NOM_ENTREPRISE], 'Durand')
        self.assertEqual(context[Placeholder.NOM_REPRESENTANT], 'Claire')
        self.assertNotIn(Placeholder.ADRESSE_SIEGE, context)
        self.assertNotIn(Placeholder.EMAIL_REPRESENTANT, context)

    def test_client_context(self):
        context = build_client_context(client_contract(client_company_registration=''))

        self.assertEqual(context[Placeholder.WORKSHOP_DATE], '5 novembre 2026')
        self.assertEqual(context[Placeholder.SIGNATURE_CODE], 'CLIENT-AB12CD34')
        self.assertEqual(context[Placeholder.CLIENT_COMPANY_REGISTRATION], '')
        self.assertEqual(context[Placeholder.SIGNATURE_STATUS], PENDING_SIGNATURE_STATUS)

    def test_signature_status_when_signed(self):
        signed_at = datetime(2026, 10, 19, 9, 30, tzinfo=dt_timezone.utc)
        status = signature_status(client_contract(is_signed=True, signed_at=signed_at))
        self.assertEqual(status, 'Signé le 19 octobre 2026')

    def test_signed_flag_without_date_is_pending(self):
        self.assertEqual(signature_status(client_contract(is_signed=True)), PENDING_SIGNATURE_STATUS)

    def test_format_long_date_accepts_strings(self):
        self.assertEqual(format_long_date('2026-01-01'), '1 janvier 2026')


class FormatCompanyRegistrationTest(SimpleTestCase):
    def test_digits_become_siret(self):
        self.assertEqual(format_company_registration('123 456 789 00012'), 'SIRET 12345678900012')
        self.assertEqual(format_company_registration('SIRET: 123.456'), 'SIRET 123456')

    def test_other_values_become_nda(self):
        self.assertEqual(format_company_registration('ABC123'), 'NDA ABC123')
        self.assertEqual(format_company_registration('nda 11 75 AB 123'), 'NDA 11 75 AB 123')

    def test_too_many_digits_is_nda(self):
        self.assertEqual(format_company_registration('123456789000123'), 'NDA 123456789000123')

    def test_empty(self):
        self.assertEqual(format_company_registration(''), '')
        self.assertEqual(format_company_registration(None), '')
        self.assertEqual(format_company_registration('SIRET'), '')
