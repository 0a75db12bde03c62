from typing import Any

from django.core.paginator import Paginator


class ServicePaginator:
    """Page through a queryset or a list for back-office list endpoints."""

    def __init__(self, default_page_size: int = 50, max_page_size: int = 200):
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def paginate(self, items, page: Any = 1, page_size: Any = None) -> dict:
        size = self.clamp_page_size(page_size)
        page_obj = Paginator(items, size).get_page(page)

        return {
            'items': list(page_obj),
            'meta': {
                'page': page_obj.number,
                'page_size': size,
                'total_pages': page_obj.paginator.num_pages,
                'total_items': page_obj.paginator.count,
                'has_next': page_obj.has_next(),
                'has_previous': page_obj.has_previous(),
            },
        }

    def clamp_page_size(self, page_size: Any) -> int:
        """Unparseable or non-positive sizes fall back to the default."""
        try:
            size = int(page_size)
        except (TypeError, ValueError):
            return self.default_page_size
        if size < 1:
            return self.default_page_size
        return min(size, self.max_page_size)
