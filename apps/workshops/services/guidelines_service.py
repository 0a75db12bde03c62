import logging

from apps.workshops.dal.workshop_dal import WorkshopDAL
from apps.workshops.dal.workshop_dal import WorkshopGuidelinesDAL
from apps.workshops.models import WorkshopGuidelines

logger = logging.getLogger(__name__)


class GuidelinesService:
    def __init__(self, dal=None, workshop_dal=None):
        self.dal = dal or WorkshopGuidelinesDAL()
        self.workshop_dal = workshop_dal or WorkshopDAL()

    def list_guidelines(self) -> list[WorkshopGuidelines]:
        return list(self.dal.get_guidelines_queryset())

    def get_guidelines(self, workshop_date) -> WorkshopGuidelines:
        return self.dal.get_guidelines_by_date(workshop_date)

    def upsert_guidelines(self, workshop_date, guidelines_markdown: str) -> tuple[WorkshopGuidelines, bool]:
        """Create or replace the guidelines of the workshop on ``workshop_date``."""
        workshop = self.workshop_dal.get_workshop_by_date(workshop_date)
        guidelines, created = self.dal.upsert_guidelines(workshop, guidelines_markdown)
        logger.info(f'Guidelines {"created" if created else "updated"} for workshop {workshop_date}')
        return guidelines, created

    def delete_guidelines(self, guidelines_id: int) -> bool:
        guidelines = self.dal.get_guidelines_by_id(guidelines_id)
        return self.dal.delete_guidelines(guidelines)
