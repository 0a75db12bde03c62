from typing import Any

from django.db import transaction
from django.db.models import Model
from django.db.models import QuerySet

from apps.content.exceptions import ContentItemNotFoundError
from apps.shared.decorators.database import handle_db_errors


class ContentDAL:
    """Data Access Layer shared by every content model"""

    def __init__(self, model: type[Model]):
        self.model = model

    @handle_db_errors(operation_type='create', model_name='Content')
    def create_item(self, data: dict[str, Any]) -> Model:
        return self.model.objects.create(**data)

    @handle_db_errors(operation_type='read', model_name='Content')
    def get_item_by_id(self, item_id: int) -> Model:
        try:
            return self.model.objects.get(id=item_id)
        except self.model.DoesNotExist:
            raise ContentItemNotFoundError(self.model.__name__, item_id)

    def get_items_queryset(self) -> QuerySet:
        """Items in the model's display order"""
        return self.model.objects.all()

    def get_existing_ids(self, ids: list[int]) -> set[int]:
        return set(self.model.objects.filter(id__in=ids).values_list('id', flat=True))

    @handle_db_errors(operation_type='update', model_name='Content')
    def update_item(self, item: Model, data: dict[str, Any]) -> Model:
        for field, value in data.items():
            setattr(item, field, value)
        item.save()
        return item

    @handle_db_errors(operation_type='update', model_name='Content')
    def reorder_items(self, ids: list[int]) -> int:
        """Set ``order`` to the position of each id in ``ids``."""
        items = {item.id: item for item in self.model.objects.filter(id__in=ids)}
        for position, item_id in enumerate(ids):
            items[item_id].order = position
        with transaction.atomic():
            return self.model.objects.bulk_update(items.values(), ['order'])

    @handle_db_errors(operation_type='delete', model_name='Content')
    def delete_item(self, item: Model) -> bool:
        item.delete()
        return True
