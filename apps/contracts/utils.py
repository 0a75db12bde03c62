import re

REGISTRATION_PREFIX = re.compile(r'^(SIRET|NDA)\s*', re.IGNORECASE)
NON_WORD = re.compile(r'[^\w\s]')
SIRET_MAX_DIGITS = 14


def format_company_registration(value: str | None) -> str:
    """
    Normalise a client company registration number.

    An existing ``SIRET``/``NDA`` prefix and punctuation are dropped, then a
    number of at most 14 digits becomes ``SIRET <digits>`` and anything
    else non-empty becomes ``NDA <text>``.

    >>> format_company_registration('123 456 789 00012')
    'SIRET 12345678900012'
    >>> format_company_registration('siret 123.456')
    'SIRET 123456'
    >>> format_company_registration('ABC123')
    'NDA ABC123'
    """
    if not value:
        return ''

    cleaned = NON_WORD.sub('', REGISTRATION_PREFIX.sub('', value.strip())).strip()
    compact = re.sub(r'\s+', '', cleaned)
    if not compact:
        return ''

    # Only all-digit input is a SIRET. Digits are not extracted from mixed
    # text, so 'ABC123' stays an NDA instead of becoming 'SIRET 123'.
    if compact.isascii() and compact.isdigit() and len(compact) <= SIRET_MAX_DIGITS:
        return f'SIRET {compact}'
    return f'NDA {cleaned}'
