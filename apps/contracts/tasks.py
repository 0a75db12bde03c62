import logging

from django.conf import settings
from django.core.mail import send_mail

from settings.celery import app

logger = logging.getLogger(__name__)


@app.task(bind=True)
def send_signature_code_email_task(
    self, email: str, representative_name: str, signature_code: str, workshop_date: str
):
    """
    Send the client the code needed to sign its contract.

    Args:
        email: Client email address
        representative_name: Person signing for the client
        signature_code: CLIENT-XXXXXXXX code
        workshop_date: Date of the workshop, long form

    Returns:
        dict with success status
    """
    try:
        subject = f'Votre code de signature pour l\'atelier du {workshop_date}'
        message = f"""Bonjour {representative_name},

Voici votre code de signature pour le contrat de l'atelier du {workshop_date} :

    {signature_code}

Saisissez ce code sur la page de signature pour valider le contrat.

Cordialement,
L'équipe des ateliers"""

        send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[email],
            fail_silently=False,
        )

        logger.info(f'Signature code email sent to: {email}')

        return {'status': 'success', 'email': email}

    except Exception as e:
        logger.exception(f'Failed to send signature code email to {email}: {e}')
        raise self.retry(countdown=60, max_retries=3, exc=e)
