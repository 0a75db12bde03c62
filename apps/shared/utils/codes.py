"""Random access codes shared with trainers and clients."""

import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_code(length: int, prefix: str = '') -> str:
    """
    Generate ``prefix`` followed by ``length`` random uppercase letters or digits.

    >>> len(generate_code(6, prefix='T-'))
    8
    """
    return prefix + ''.join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def generate_trainer_code() -> str:
    return generate_code(6, prefix='T-')


def generate_signature_code() -> str:
    return generate_code(8, prefix='CLIENT-')


def generate_workshop_password() -> str:
    return generate_code(8)
